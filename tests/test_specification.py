"""Tests for stored rule specifications."""

from dataknobs_rules.specification import Bare, WithOptions, resolve, to_plain, unwrap, wrap


class TestWrap:
    """Test building specifications from rule arguments."""

    def test_no_options_is_bare(self):
        """Test that a rule without options is stored verbatim."""
        assert wrap(True) == Bare(True)
        assert wrap([1, 2], {}) == Bare([1, 2])

    def test_options_are_wrapped(self):
        """Test that options produce a wrapped specification."""
        spec = wrap([1, 2], {"message": "Pick one", "case": "lower"})
        assert spec == WithOptions(rule=[1, 2], message="Pick one", extra={"case": "lower"})

    def test_wrap_does_not_modify_options(self):
        """Test that the caller's options dict is left alone."""
        options = {"message": "m"}
        wrap(True, options)
        assert options == {"message": "m"}

    def test_bare_mapping_with_rule_key_stays_bare(self):
        """Test that a bare mapping argument is not mistaken for options."""
        spec = wrap({"rule": "looks wrapped"})
        assert isinstance(spec, Bare)
        assert resolve(spec) == ({"rule": "looks wrapped"}, None, {})


class TestResolve:
    """Test splitting specifications."""

    def test_resolve_bare(self):
        """Test resolving a bare specification."""
        assert resolve(Bare(True)) == (True, None, {})

    def test_resolve_wrapped(self):
        """Test resolving a wrapped specification."""
        spec = WithOptions(rule=3, message="Too short", extra={"strict": True})
        assert resolve(spec) == (3, "Too short", {"strict": True})

    def test_resolved_options_are_a_copy(self):
        """Test that callers cannot alter stored options through resolve."""
        spec = WithOptions(rule=3, extra={"strict": True})
        resolve(spec)[2]["strict"] = False
        assert spec.extra == {"strict": True}

    def test_unwrap(self):
        """Test getting the plain rule argument."""
        assert unwrap(None) is None
        assert unwrap(Bare("Email")) == "Email"
        assert unwrap(WithOptions(rule=5, message="m")) == 5


class TestToPlain:
    """Test plain data form."""

    def test_plain_forms(self):
        """Test bare and wrapped specifications."""
        assert to_plain(Bare([1])) == [1]
        assert to_plain(WithOptions(rule=True)) == {"rule": True}
        assert to_plain(WithOptions(rule=True, message="m", extra={"a": 1})) == {
            "a": 1,
            "message": "m",
            "rule": True,
        }
