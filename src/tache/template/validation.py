"""Static inspection of templates."""

from collections.abc import Collection

from tache.core.config import RenderConfig
from tache.template.enums import TagType
from tache.template.scanner import TagScanner
from tache.template.session import RenderSession
from tache.template.tags import Delimiters

KEY_TAG_TYPES = frozenset(
    {TagType.VALUE, TagType.SECTION_START, TagType.INVERTED_SECTION_START}
)


def collect_keys(
    template: object,
    *,
    tag_types: Collection[TagType] = KEY_TAG_TYPES,
    config: RenderConfig | None = None,
) -> set[str]:
    """Extract the keys referenced by a template.

    Tags are read in order, following delimiter changes, without consulting
    any context. Partials are not expanded; pass ``{TagType.PARTIAL}`` as
    ``tag_types`` to list the partial names instead.

    Args:
        template: Template text
        tag_types: Tag types whose keys are collected
        config: Optional render configuration providing the initial markers

    Returns:
        Set of keys found. Scanning stops at an invalid delimiter tag.

    Raises:
        TypeError: When template is not a string

    """
    if not isinstance(template, str):
        msg = f"Cannot collect keys from {type(template).__name__}"
        raise TypeError(msg)

    config = config or RenderConfig()
    session = RenderSession(
        delimiters=Delimiters(config.start_marker, config.end_marker)
    )
    scanner = TagScanner(session)
    keys: set[str] = set()
    pos = 0
    while not session.failed:
        tag = scanner.find_tag(template, pos, len(template))
        if tag.type is TagType.NULL:
            break
        if tag.type in tag_types and tag.key:
            keys.add(tag.key)
        pos = tag.end
    return keys
