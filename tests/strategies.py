"""Hypothesis strategies for proplexengine property-based testing.

Strategy Categories:
- Key/value strategies: Text that survives a serialize -> load round trip
- Store strategies: Mappings to build stores from
- Chaos strategies: Arbitrary source text built from the format's special characters
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

# =============================================================================
# Constants
# =============================================================================

# Characters with meaning in .properties syntax
SPECIAL_CHARS = "=: \t\f\\#!\"\n\r"

# =============================================================================
# Key/value strategies
# =============================================================================

simple_keys = st.from_regex(r"[A-Za-z][A-Za-z0-9_.-]{0,20}", fullmatch=True)
"""Keys free of delimiters, escapes and comment markers."""

simple_values = st.from_regex(
    r"[A-Za-z0-9./_-]([A-Za-z0-9 ./_-]{0,30}[A-Za-z0-9./_-])?", fullmatch=True
)
"""Non-empty unquoted values without delimiters, backslashes or surrounding whitespace."""

whitespace = st.text(alphabet=" \t\f", max_size=4)

# =============================================================================
# Store strategies
# =============================================================================

simple_mappings = st.dictionaries(simple_keys, simple_values, max_size=20)

simple_mappings_with_none = st.dictionaries(
    simple_keys, st.one_of(st.none(), simple_values), max_size=20
)

# =============================================================================
# Chaos strategies
# =============================================================================


@composite
def chaos_source(draw: st.DrawFn) -> str:
    """Arbitrary text weighted toward delimiters, escapes and line breaks."""
    text = draw(st.text(alphabet=st.sampled_from(SPECIAL_CHARS + "abc"), max_size=80))
    backslashes = min(text.count("\\"), 5)
    event(f"chaos_backslashes={backslashes}")
    return text


@composite
def backslash_runs(draw: st.DrawFn) -> int:
    """Number of trailing backslashes for continuation parity tests."""
    count = draw(st.integers(min_value=0, max_value=9))
    event(f"parity={'odd' if count % 2 else 'even'}")
    return count
