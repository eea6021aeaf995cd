"""Built-in annotation rules and rule file loading.

The default table links the profile page's list functions to their
own pages and turns the e-mail address and quoted URLs into links.
Patterns target Pygments HTML class names: ``nx`` (other names),
``nf`` (function names), ``p`` (punctuation), ``s`` (strings) and
``w`` (whitespace). String quotes are matched in both their literal and
entity forms.
"""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from codepages.interfaces.annotator import AnnotationRule, RuleFileError
from codepages.strategies.annotators.models import RuleSpec

logger = logging.getLogger(__name__)

# Whitespace between tokens, bare or wrapped in a whitespace span.
_GAP = r'(?:\s|<span class="w">\s*</span>)*'

# A double quote as Pygments writes it: literal in current releases,
# an entity in older ones.
_QUOTE = r'(?:&quot;|&#34;|")'

DEFAULT_RULES: tuple[AnnotationRule, ...] = (
    AnnotationRule(
        patterns=(
            rf'(<span class="nx">Experience</span><span class="p">:</span>{_GAP}<span class="n[xf]">)'
            r"(ListExperience)(</span>)",
        ),
        replacement=r'\1<a href="experience.html" title="Expand experience list" class="nf">\2</a>\3',
    ),
    AnnotationRule(
        patterns=(
            rf'(<span class="nx">ContactOptions</span><span class="p">:</span>{_GAP}<span class="n[xf]">)'
            r"(ListContactOptions)(</span>)",
        ),
        replacement=r'\1<a href="contact.html" title="See contact options" class="nf">\2</a>\3',
    ),
    AnnotationRule(
        patterns=(r"(rdominguez@tecnologer\.net)",),
        replacement=r'<a href="mailto:\g<1>" class="s">\g<1></a>',
    ),
    AnnotationRule(
        patterns=(rf'(<span class="s">{_QUOTE})(http(s)?://.+?)({_QUOTE}</span>)',),
        replacement=r'\1<a href="\2" class="s">\2</a>\4',
    ),
)

_RULE_FILE_ADAPTER = TypeAdapter(list[RuleSpec])


def load_rules(path: Path) -> tuple[AnnotationRule, ...]:
    """Load a rule table from a JSON file.

    The file holds a list of ``{"patterns": [...], "replacement": "..."}``
    objects, applied in file order.

    Args:
        path: Location of the rule file.

    Returns:
        The rule table as an immutable tuple.

    Raises:
        RuleFileError: If the file cannot be read or is not a valid rule list.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise RuleFileError(f"Cannot read rule file {path}: {e}") from e

    try:
        specs = _RULE_FILE_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise RuleFileError(f"Invalid rule file {path}: {e}") from e

    rules = tuple(spec.to_rule() for spec in specs)
    logger.info(f"Loaded {len(rules)} annotation rules from {path}")
    return rules
