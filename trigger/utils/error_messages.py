"""
Centralized Error Message Templates

Consistent, actionable error messages for the failures a user running
lookup steps can hit.
"""

from typing import Dict
from enum import Enum
import logging


class ErrorCategory(Enum):
    """Categories of errors that can occur in the system."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    LOOKUP_STORE = "lookup_store"
    EVENT = "event"
    FILE_ACCESS = "file_access"


class ErrorMessages:
    """
    Error message templates with suggestions, grouped by category.
    """

    CONFIGURATION_TEMPLATES = {
        "invalid_configuration": """
Configuration Error: {error_details}

Suggestions:
  • Field names may only contain letters, digits, '_', '-' and '.'
  • Run 'trigger-lookup config validate' to check the merged configuration
  • Run 'trigger-lookup config init' to generate a valid configuration file
""",
    }

    VALIDATION_TEMPLATES = {
        "missing_field": """
Validation Error: Field '{field_name}' is not present in the workflow data

The step is configured to read the user id from '{field_name}', but neither
the event nor the workflow data provides it.

Suggestions:
  • Add '{field_name}' to the workflow data passed with --data
  • Point the step at another field: --useridfield <name>
""",
    }

    LOOKUP_STORE_TEMPLATES = {
        "lookup_failed": """
Lookup Store Error: {error_details}

Suggestions:
  • Check the database URL (--database-url or TRIGGER_DATABASE_URL)
  • Check the table prefix (--table-prefix or TRIGGER_TABLE_PREFIX)
  • Make sure the groups and roles tables exist
""",
    }

    EVENT_TEMPLATES = {
        "invalid_event": """
Event Error: {error_details}

Suggestions:
  • The event must be a JSON object with an 'eventname' key
  • 'objectid' must be an integer
""",
    }

    FILE_TEMPLATES = {
        "file_not_found": """
File Error: {file_path} not found

Suggestions:
  • Check the file path and try again
""",
        "invalid_json": """
File Error: {file_path} is not valid JSON

{error_details}
""",
    }

    @classmethod
    def format_error(cls, category: ErrorCategory, template_key: str, **kwargs) -> str:
        """
        Format an error message using the specified template.

        Falls back to a generic message when the template is unknown or a
        template variable is missing.
        """
        templates = cls._get_templates_for_category(category)

        if template_key not in templates:
            return cls._format_generic_error(category, template_key, **kwargs)

        try:
            return templates[template_key].format(**kwargs).strip()
        except KeyError as e:
            logging.warning(f"Missing template variable {e} for {category.value}.{template_key}")
            return cls._format_generic_error(category, template_key, **kwargs)

    @classmethod
    def _get_templates_for_category(cls, category: ErrorCategory) -> Dict[str, str]:
        """Get templates for a specific error category."""
        template_map = {
            ErrorCategory.CONFIGURATION: cls.CONFIGURATION_TEMPLATES,
            ErrorCategory.VALIDATION: cls.VALIDATION_TEMPLATES,
            ErrorCategory.LOOKUP_STORE: cls.LOOKUP_STORE_TEMPLATES,
            ErrorCategory.EVENT: cls.EVENT_TEMPLATES,
            ErrorCategory.FILE_ACCESS: cls.FILE_TEMPLATES,
        }
        return template_map.get(category, {})

    @classmethod
    def _format_generic_error(cls, category: ErrorCategory, template_key: str, **kwargs) -> str:
        """Format a generic error message when specific template is not found."""
        error_details = kwargs.get('error_details', 'Unknown error occurred')

        return f"""
{category.value.replace('_', ' ').title()} Error: {template_key}

{error_details}

General Suggestions:
  • Try running with --log-level debug for additional details
  • Verify your configuration and input files

For help: trigger-lookup --help
""".strip()


class ErrorFormatter:
    """Utility class for formatting errors with consistent styling."""

    @staticmethod
    def format_for_cli(error_message: str) -> str:
        """Format error message for CLI output."""
        return f"Error: {error_message}" if "Error" not in error_message.split("\n", 1)[0] else error_message
