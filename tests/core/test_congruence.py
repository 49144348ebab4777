"""
Tests for the congruence index.

Core claims:
    - Hash-consing: adding the same (operator, children) twice yields one class
    - Congruence:   after a ∼ b, f(a) ∼ f(b), and that lifts through nesting
    - Laziness:     union only marks the index dirty; equiv rebuilds first
    - Soundness:    classes never merge without a chain of unions/congruences
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from wireproof.core.congruence import CongruenceIndex


# ── Helpers ──────────────────────────────────────────────────────────────────

def leaves(index, *names):
    return [index.add(("var", name), ()) for name in names]


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestAdd:
    def test_fresh_leaves_get_distinct_classes(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        assert a != b
        assert not index.equiv(a, b)
        assert len(index) == 2

    def test_identical_keys_are_hash_consed(self):
        index = CongruenceIndex()
        a1 = index.add(("var", "a"), ())
        a2 = index.add(("var", "a"), ())
        assert a1 == a2
        assert len(index) == 1

    def test_children_order_matters(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        ab = index.add("∧", [a, b])
        ba = index.add("∧", [b, a])
        assert not index.equiv(ab, ba)

    def test_children_may_be_a_generator(self):
        index = CongruenceIndex()
        a, = leaves(index, "a")
        fa1 = index.add("f", iter([a]))
        fa2 = index.add("f", (c for c in [a]))
        assert fa1 == fa2


class TestUnion:
    def test_union_returns_whether_anything_changed(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        assert index.union(a, b)
        assert not index.union(b, a)

    def test_union_marks_dirty_until_query(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        assert index.clean
        index.union(a, b)
        assert not index.clean
        assert index.equiv(a, b)
        assert index.clean

    def test_find_is_smallest_member(self):
        index = CongruenceIndex()
        a, b, c = leaves(index, "a", "b", "c")
        index.union(c, b)
        index.union(b, a)
        assert index.find(c) == a


class TestCongruence:
    def test_congruent_parents_merge(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        fa = index.add("f", [a])
        fb = index.add("f", [b])
        assert not index.equiv(fa, fb)
        index.union(a, b)
        assert index.equiv(fa, fb)

    def test_congruence_lifts_through_nesting(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        gfa = index.add("g", [index.add("f", [a])])
        gfb = index.add("g", [index.add("f", [b])])
        index.union(a, b)
        assert index.equiv(gfa, gfb)

    def test_different_operators_stay_apart(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        fa = index.add("f", [a])
        gb = index.add("g", [b])
        index.union(a, b)
        assert not index.equiv(fa, gb)

    def test_add_after_union_finds_existing_class(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        fa = index.add("f", [a])
        index.union(a, b)
        index.rebuild()
        assert index.equiv(index.add("f", [b]), fa)

    def test_binary_operator_needs_both_children(self):
        index = CongruenceIndex()
        a, b, c = leaves(index, "a", "b", "c")
        ac = index.add("∧", [a, c])
        bc = index.add("∧", [b, c])
        ab = index.add("∧", [a, b])
        index.union(a, b)
        assert index.equiv(ac, bc)
        assert not index.equiv(ab, ac)


class TestCopy:
    def test_copy_is_independent(self):
        index = CongruenceIndex()
        a, b = leaves(index, "a", "b")
        other = index.copy()
        other.union(a, b)
        assert other.equiv(a, b)
        assert not index.equiv(a, b)


# ── Property-based tests ─────────────────────────────────────────────────────

@st.composite
def leaf_unions(draw, max_leaves=6):
    n = draw(st.integers(min_value=2, max_value=max_leaves))
    pairs = draw(st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=8))
    return n, pairs


class TestCongruenceProperties:

    @given(leaf_unions())
    @settings(max_examples=150)
    def test_unary_parents_follow_their_children(self, data):
        """f(x) ∼ f(y) exactly when x ∼ y, for leaves only ever unioned directly."""
        n, pairs = data
        index = CongruenceIndex()
        xs = leaves(index, *[f"x{i}" for i in range(n)])
        fs = [index.add("f", [x]) for x in xs]
        for i, j in pairs:
            index.union(xs[i], xs[j])
        for i in range(n):
            for j in range(n):
                assert index.equiv(fs[i], fs[j]) == index.equiv(xs[i], xs[j])

    @given(leaf_unions())
    def test_equiv_is_an_equivalence(self, data):
        n, pairs = data
        index = CongruenceIndex()
        xs = leaves(index, *[f"x{i}" for i in range(n)])
        for i, j in pairs:
            index.union(xs[i], xs[j])
        for a in xs:
            assert index.equiv(a, a)
            for b in xs:
                assert index.equiv(a, b) == index.equiv(b, a)
                for c in xs:
                    if index.equiv(a, b) and index.equiv(b, c):
                        assert index.equiv(a, c)
