"""
Default values for the admin settings configuration.
"""

DEFAULT_NAMESPACE = "ptam"
DEFAULT_PAGE_SLUG = "custom-query-blocks"
DEFAULT_PAGE_TITLE = "Custom Query Blocks"
DEFAULT_ADMIN_URL = "/wp-admin"
DEFAULT_PARENT_PAGE = "options-general.php"
DEFAULT_CAPABILITY = "manage_options"
DEFAULT_PLUGIN_FILE = "post-type-archive-mapping/post-type-archive-mapping.php"
DEFAULT_PRO_URL = "https://dlxplugins.com/plugins/archive-pages-pro/"
DEFAULT_SUPPORT_URL = "https://wordpress.org/support/plugin/post-type-archive-mapping/"
DEFAULT_INFO_TEXT = (
    "This plugin provides several helper Query Blocks as well as archive mapping "
    "for post type archives, terms, and a 404 page."
)

# Fallback tab when the request names no tab or an unknown one.
DEFAULT_TAB = "settings"

NAMESPACE_ENV_VAR = "PTAM_NAMESPACE"
ADMIN_URL_ENV_VAR = "PTAM_ADMIN_URL"
