"""Property-based tests for clone and equivalence on generated graphs."""

from hypothesis import given
from hypothesis import strategies as st

from objextras import clone, is_equivalent_to

scalars = st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False) | st.text()

graphs = st.recursive(
    scalars,
    lambda children: (
        st.lists(children, max_size=4)
        | st.dictionaries(st.text(max_size=5), children, max_size=4)
        | st.tuples(children, children)
    ),
    max_leaves=20,
)


def _mutable_ids(value, found=None):
    found = set() if found is None else found
    if isinstance(value, list):
        found.add(id(value))
        for item in value:
            _mutable_ids(item, found)
    elif isinstance(value, dict):
        found.add(id(value))
        for item in value.values():
            _mutable_ids(item, found)
    elif isinstance(value, tuple):
        for item in value:
            _mutable_ids(item, found)
    return found


@given(value=graphs)
def test_equivalence_is_reflexive(value):
    """PROPERTY: Every value is equivalent to itself."""
    assert is_equivalent_to(value, value)


@given(value=graphs)
def test_clone_preserves_value(value):
    """PROPERTY: A clone is equal and equivalent to its original, in both directions."""
    copy = clone(value)

    assert copy == value
    assert is_equivalent_to(value, copy)
    assert is_equivalent_to(copy, value)


@given(value=graphs)
def test_clone_shares_no_mutable_container(value):
    """PROPERTY: No list or dict of the clone is also reachable from the original.

    A shared container means mutating the copy would change the original.
    """
    original_ids = _mutable_ids(value)
    copy = clone(value)

    assert original_ids.isdisjoint(_mutable_ids(copy))


@given(value=graphs)
def test_ignore_null_source_accepts_none_source(value):
    """PROPERTY: A None source matches anything when nulls are ignored."""
    assert is_equivalent_to(None, value, ignore_null_source=True)
