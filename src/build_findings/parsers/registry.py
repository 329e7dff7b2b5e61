"""
Registry of the available parsers, keyed by parser ID.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.parser import IssueParser
from ..utils.exceptions import ConfigurationError
from .msbuild import MsBuildParser
from .taglist import TaglistParser
from .violations.docfx import DocFxAdapter

ParserFactory = Callable[[], IssueParser]


@dataclass
class ParserRegistry:
    factories: dict[str, ParserFactory] = field(default_factory=dict)

    def register(self, parser_id: str, factory: ParserFactory) -> None:
        key = parser_id.strip().lower()
        if key in self.factories:
            raise ConfigurationError(
                "Parser is already registered", config_field="parser_id", config_value=key
            )
        self.factories[key] = factory

    def create(self, parser_id: str) -> IssueParser:
        """Create a new parser instance for the given ID."""
        factory = self.factories.get(parser_id.strip().lower())
        if factory is None:
            raise ConfigurationError(
                f"Unknown parser, expected one of {', '.join(self.ids)}",
                config_field="parser_id",
                config_value=parser_id,
            )
        return factory()

    @property
    def ids(self) -> list[str]:
        return sorted(self.factories)


def default_registry() -> ParserRegistry:
    registry = ParserRegistry()
    registry.register(MsBuildParser.parser_id, MsBuildParser)
    registry.register(TaglistParser.parser_id, TaglistParser)
    registry.register(DocFxAdapter.parser_id, DocFxAdapter)
    return registry
