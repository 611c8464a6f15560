"""
Site Registries

Centralized registries for loading and caching the anchor contract and the
fragment templates used to render structured records.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from omegaconf import OmegaConf

load_dotenv()

SITE_CONTEXT_PATH = Path(__file__).parent
SITE_SCHEMA_PATH = Path(os.getenv("SITE_SCHEMA_PATH", SITE_CONTEXT_PATH / "site_schema.yaml"))
FRAGMENT_TEMPLATES_PATH = SITE_CONTEXT_PATH / "templates"


class SiteSchemaRegistry:
    """
    Registry for the anchor contract of the destination page.

    The contract (site_schema.yaml) names every selector, id and class the
    synchronizer relies on. It is loaded once per path and cached.
    """

    def __init__(self, schema_path: Path = None):
        """
        Initialize the schema registry.

        Args:
            schema_path: Path to the schema YAML. Defaults to SITE_SCHEMA_PATH
                         from environment, else the packaged site_schema.yaml
        """
        if schema_path is None:
            schema_path = SITE_SCHEMA_PATH

        self.schema_path = Path(schema_path)
        self._cache: Dict[str, Any] = {}

    def get_schema(self) -> Dict[str, Any]:
        """
        Get the anchor contract, loading and caching it if necessary.

        Returns:
            Dict with one entry per anchor group (header, sections, experience, ...)

        Raises:
            FileNotFoundError: If the schema file doesn't exist
        """
        if self._cache:
            return self._cache

        if not self.schema_path.exists():
            raise FileNotFoundError(f"Site schema not found at {self.schema_path}")

        schema = OmegaConf.load(self.schema_path)
        self._cache = OmegaConf.to_container(schema, resolve=True)
        return self._cache

    def get(self, group: str) -> Dict[str, Any]:
        """
        Get one anchor group from the contract.

        Args:
            group: Top-level key (e.g., 'certifications')

        Returns:
            Dict of settings for that group
        """
        return self.get_schema()[group]

    def clear_cache(self):
        """Clear the schema cache."""
        self._cache = {}


class FragmentTemplateRegistry:
    """
    Registry for loading and caching Jinja2 fragment templates.

    Templates live in contexts/site/templates/{name}.html.jinja and render one
    record each. Autoescaping is on: record fields are plain text.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding *.html.jinja templates.
                            Defaults to the packaged templates directory
        """
        if templates_path is None:
            templates_path = FRAGMENT_TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            keep_trailing_newline=False,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'education_entry')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.html.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Fragment template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def render(self, name: str, **context) -> str:
        """Render a fragment template to an HTML string."""
        return self.get_template(name).render(**context)

    def is_cached(self, name: str) -> bool:
        return name in self._cache
