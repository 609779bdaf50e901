# ABOUTME: Canonical intelligence entry/bundle schema and the closed domain, type and severity enumerations
# ABOUTME: Every extractor emits IntelligenceEntry objects; the pipeline persists IntelligenceBundle documents

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryType(str, Enum):
    """Semantic nature of an intelligence entry."""

    PATTERN = "pattern"
    ANTI_PATTERN = "anti-pattern"
    RULE = "rule"


class Severity(str, Enum):
    """Closed three-value severity taxonomy."""

    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class TargetDomain(str, Enum):
    """Knowledge categories, in the order the pipeline processes them."""

    DESIGN_TOKENS = "design-tokens"
    COMPONENTS = "components"
    STORYBOOK = "storybook"
    ACCESSIBILITY = "accessibility"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    COLOR_SYSTEM = "color-system"
    UX_PATTERNS = "ux-patterns"


TARGET_DOMAINS: tuple[str, ...] = tuple(domain.value for domain in TargetDomain)

REQUIRED_FIELDS: tuple[str, ...] = ("id", "type", "domain", "title", "severity", "description", "tags")
VALID_TYPES: frozenset[str] = frozenset(t.value for t in EntryType)
VALID_SEVERITIES: frozenset[str] = frozenset(s.value for s in Severity)


class IntelligenceEntry(BaseModel):
    """A single normalized knowledge record.

    Optional fields use camelCase aliases on the wire (``counterExample``,
    ``appliesTo``) and are left out of serialized bundles when unset.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, frozen=True)

    id: str = Field(description="Corpus-wide unique identifier derived from domain and key")
    type: EntryType
    domain: str
    title: str = Field(description="Human-readable headline")
    severity: Severity
    description: str
    tags: list[str] = Field(default_factory=list)
    context: str | None = None
    example: str | None = None
    counter_example: str | None = Field(default=None, alias="counterExample")
    why: str | None = None
    applies_to: list[str] | None = Field(default=None, alias="appliesTo")

    @field_validator("id", "domain", "title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_json_dict(self) -> dict:
        """Wire representation: aliased keys, unset optionals dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


class IntelligenceBundle(BaseModel):
    """The persisted collection of entries for one domain."""

    domain: str
    version: str
    entries: list[IntelligenceEntry] = Field(default_factory=list)

    def to_json(self) -> str:
        """Pretty-printed JSON document for this bundle."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)

