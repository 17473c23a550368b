"""
Constants and default values for model conversions.

Centralizes the fallbacks used when converting API responses to models.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"

#
# Jira defaults
#
JIRA_DEFAULT_ID = "0"

# Prefix Jira uses for deployment-specific field ids
CUSTOM_FIELD_PREFIX = "customfield_"

# Field id holding story points on greenhopper-enabled instances
STORY_POINTS_FIELD = "customfield_10004"

# Atom namespace used by the activity stream
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
