"""Email template files and placeholder rendering.

A template file holds the subject on its first line, an empty separator
line, and the body in the rest of the file. Subject and body may contain
``{{key}}`` placeholders that are replaced with literal values; there is no
other template syntax.
"""

import logging
import re
from pathlib import Path
from typing import Mapping, Tuple, Union

from .models import EmailTemplate, NotificationTemplateError

logger = logging.getLogger(__name__)


def load_template(path: Union[str, Path]) -> EmailTemplate:
    """Load an EmailTemplate from a file.

    Lines are split on ``\\n`` only and the body is kept byte-for-byte, so
    CRLF files keep their line endings.

    Args:
        path: Path to the template file

    Returns:
        EmailTemplate with the file's subject and body

    Raises:
        NotificationTemplateError: If the file cannot be read or decoded, the
            first line is blank, or the second line is not empty
    """
    template_path = Path(path)

    try:
        with open(template_path, "rb") as f:
            subject_line = f.readline().decode("utf-8")
            separator_line = f.readline().decode("utf-8")
            body = f.read().decode("utf-8")
    except OSError as e:
        error_msg = f"Failed to read template file {template_path}: {e}"
        logger.error(error_msg)
        raise NotificationTemplateError(error_msg) from e
    except UnicodeDecodeError as e:
        raise NotificationTemplateError(
            f"Template file {template_path} is not valid UTF-8: {e}"
        ) from e

    subject = subject_line.strip()
    if not subject:
        raise NotificationTemplateError("The first line must be a message Subject")

    if separator_line.rstrip("\r\n"):
        raise NotificationTemplateError("The second line must be empty")

    logger.debug(f"Loaded email template from {template_path}")
    return EmailTemplate(subject=subject, body=body)


class TemplateRenderer:
    """Substitutes ``{{key}}`` placeholders in email templates.

    Each template string is scanned once, so a substituted value is never
    itself searched for placeholders. Placeholders without a matching key
    are left as they are.
    """

    def render(
        self, template: EmailTemplate, params: Mapping[str, object]
    ) -> Tuple[str, str]:
        """Render a template's subject and body.

        Args:
            template: Template to render
            params: Placeholder values keyed by placeholder name

        Returns:
            Tuple of (subject, body)
        """
        return (
            self.render_string(template.subject, params),
            self.render_string(template.body, params),
        )

    def render_string(self, text: str, params: Mapping[str, object]) -> str:
        """Replace every known ``{{key}}`` placeholder in a single string."""
        if not params:
            return text

        # Longest keys first so the alternation prefers the most specific placeholder
        keys = sorted(params, key=len, reverse=True)
        pattern = re.compile(
            r"\{\{(" + "|".join(re.escape(key) for key in keys) + r")\}\}"
        )
        return pattern.sub(lambda match: str(params[match.group(1)]), text)
