"""Task search query parser.

Parses the text typed into the search box into a structured `Query`.

Rules
- Words separated by whitespace are free-text terms, combined with AND.
- `AND` / `OR` / `NOT` (any case) set the operator of the next term. A keyword
  must be followed by whitespace, a quote, or the end of input, so words such
  as "Andrew" or "notes" stay ordinary terms.
- `"some phrase"` is an exact phrase; a missing closing quote runs to the end.
- `-word` negates the word regardless of a preceding keyword.
- `word*` is a prefix (wildcard) match.
- `field:value` constrains one task attribute. The value may start with one
  of `>=`, `<=`, `>`, `<`, `=`; without a prefix the filter is a substring
  match. Unknown field names leave the token as a plain word.

Field names
- title, name                  -> title
- desc, description, notes     -> description
- amount, price, cost          -> amount
- section, category            -> section
- priority                     -> priority
- status, complete, completed  -> status
- due, duedate, date           -> dueDate

Parsing never fails: malformed input yields a best-effort partial query.
"""

from __future__ import annotations

from typing import Final

from TaskSearch.core.query import Comparison, Field, FieldFilter, Operator, Query, Term

_FIELD_NAMES: Final[dict[str, Field]] = {
    "title": Field.TITLE,
    "name": Field.TITLE,
    "desc": Field.DESCRIPTION,
    "description": Field.DESCRIPTION,
    "notes": Field.DESCRIPTION,
    "amount": Field.AMOUNT,
    "price": Field.AMOUNT,
    "cost": Field.AMOUNT,
    "section": Field.SECTION,
    "category": Field.SECTION,
    "priority": Field.PRIORITY,
    "status": Field.STATUS,
    "complete": Field.STATUS,
    "completed": Field.STATUS,
    "due": Field.DUE_DATE,
    "duedate": Field.DUE_DATE,
    "date": Field.DUE_DATE,
}

# Longer prefixes first so ">=" wins over ">".
_COMPARISON_PREFIXES: Final[tuple[tuple[str, Comparison], ...]] = (
    (">=", Comparison.GREATER_OR_EQUAL),
    ("<=", Comparison.LESS_OR_EQUAL),
    (">", Comparison.GREATER_THAN),
    ("<", Comparison.LESS_THAN),
    ("=", Comparison.EQUALS),
)

_KEYWORDS: Final[tuple[tuple[str, Operator], ...]] = (
    ("AND", Operator.AND),
    ("OR", Operator.OR),
    ("NOT", Operator.NOT),
)


def parse_query(text: str) -> Query:
    """Parse a raw search string into a `Query`.

    Args:
        text: Raw search box contents.

    Returns:
        The parsed query; empty when the input is blank.
    """
    source = text.strip()
    if not source:
        return Query()

    terms: list[Term] = []
    filters: list[FieldFilter] = []
    pending = Operator.AND
    pos = 0
    end = len(source)

    while pos < end:
        while pos < end and source[pos].isspace():
            pos += 1
        if pos >= end:
            break

        keyword = _match_keyword(source, pos)
        if keyword is not None:
            pending, pos = keyword
            continue

        if source[pos] == '"':
            phrase, pos = _read_phrase(source, pos)
            terms.append(Term(text=phrase, is_exact_phrase=True, operator=pending))
            pending = Operator.AND
            continue

        word, new_pos = _read_word(source, pos)
        if not word:
            pos += 1
            continue

        field_filter = parse_field_filter(word)
        if field_filter is not None:
            filters.append(field_filter)
        else:
            term = _word_term(word, pending)
            if term is not None:
                terms.append(term)
        pending = Operator.AND
        pos = new_pos

    return Query(terms=tuple(terms), field_filters=tuple(filters))


def parse_field_filter(word: str) -> FieldFilter | None:
    """Parse a `field:value` token.

    Args:
        word: A single whitespace-free token.

    Returns:
        The field filter, or None when the token is not a recognized filter.
    """
    name, sep, value = word.partition(":")
    if not sep or not name or not value:
        return None
    field = _FIELD_NAMES.get(name.lower())
    if field is None:
        return None

    for prefix, comparison in _COMPARISON_PREFIXES:
        if value.startswith(prefix):
            return FieldFilter(field=field, comparison=comparison, value=value[len(prefix):])
    return FieldFilter(field=field, comparison=Comparison.CONTAINS, value=value)


def _match_keyword(source: str, pos: int) -> tuple[Operator, int] | None:
    for keyword, operator in _KEYWORDS:
        stop = pos + len(keyword)
        if source[pos:stop].upper() != keyword:
            continue
        if stop == len(source) or source[stop].isspace() or source[stop] == '"':
            return operator, stop
    return None


def _read_phrase(source: str, pos: int) -> tuple[str, int]:
    start = pos + 1
    close = source.find('"', start)
    if close == -1:
        return source[start:], len(source)
    return source[start:close], close + 1


def _read_word(source: str, pos: int) -> tuple[str, int]:
    stop = pos
    while stop < len(source) and not source[stop].isspace():
        stop += 1
    return source[pos:stop], stop


def _word_term(word: str, pending: Operator) -> Term | None:
    operator = pending
    text = word
    if text.startswith("-"):
        text = text[1:]
        operator = Operator.NOT

    is_wildcard = text.endswith("*")
    if is_wildcard:
        text = text[:-1]

    if not text:
        return None
    return Term(text=text, is_wildcard=is_wildcard, operator=operator)
