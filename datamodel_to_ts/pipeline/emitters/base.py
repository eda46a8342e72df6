"""
Base class for declaration emitters.

Sets up the Jinja2 environment shared by the enum and model emitters.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..config import GeneratorConfig

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "typescript"


class TemplateEmitter:
    """Renders one declaration per schema entity from a Jinja2 template."""

    # Template file name, relative to the typescript template directory
    TEMPLATE_NAME: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the emitter.

        Args:
            config: Resolved configuration
        """
        self.config = config
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.template = self.jinja_env.get_template(self.TEMPLATE_NAME)

    def render(self, **context) -> str:
        """Render the template, without a trailing newline."""
        return self.template.render(**context).rstrip("\n")
