"""Console report for the magazine demonstration.

Renders the results of a demonstration run through a plain-text Jinja2
template.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .filters import FILTERS

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class ReportRenderer:
    """Render demonstration results as console text.

    Attributes:
        template_name: Name of the Jinja2 template file
        templates_dir: Directory containing templates
    """

    def __init__(
        self,
        template_name: str = "report.txt.j2",
        templates_dir: Path | None = None,
    ):
        """Initialize the report renderer.

        Args:
            template_name: Name of the Jinja2 template file
            templates_dir: Directory containing templates (default: package templates/)
        """
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def render(self, **context) -> str:
        """Render the report template.

        Args:
            **context: Values exposed to the template

        Returns:
            The rendered report text
        """
        template = self._env.get_template(self.template_name)
        logger.debug(f"Rendering {self.template_name} with {sorted(context)}")
        return template.render(**context)
