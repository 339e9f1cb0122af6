"""Tests for the category vocabulary."""

from member_order import categories as cat


class TestDefaultOrder:
    """Tests for the default category order."""

    def test_has_no_duplicates(self) -> None:
        """Every category appears exactly once."""
        assert len(cat.DEFAULT_ORDER) == len(set(cat.DEFAULT_ORDER))

    def test_lifecycle_hooks_sit_between_constructor_and_listeners(self) -> None:
        """Lifecycle categories follow the constructor in hook order."""
        start = cat.DEFAULT_ORDER.index(cat.INSTANCE_CONSTRUCTOR) + 1
        hooks = cat.DEFAULT_ORDER[start : start + len(cat.LIFECYCLE_HOOKS)]

        assert hooks == tuple(cat.LIFECYCLE_CATEGORIES.values())
        assert cat.DEFAULT_ORDER[start + len(hooks)] == cat.COMPONENT_LISTENER_GLOBAL

    def test_boundaries(self) -> None:
        """Static properties come first and instance methods last."""
        assert cat.DEFAULT_ORDER[0] == cat.STATIC_PROPERTY
        assert cat.DEFAULT_ORDER[-1] == cat.INSTANCE_METHOD
        assert len(cat.DEFAULT_ORDER) == 26

    def test_unknown_is_not_a_category(self) -> None:
        """The unknown sentinel is outside the vocabulary."""
        assert not cat.is_category(cat.UNKNOWN)
        assert cat.is_category(cat.COMPONENT_INPUT)


class TestLifecycleCategories:
    """Tests for lifecycle hook category names."""

    def test_category_strips_ng_and_lowercases(self) -> None:
        """Hook names lose their ng prefix and are lowercased."""
        assert cat.lifecycle_category("ngAfterContentChecked") == (
            "lifecycle-aftercontentchecked"
        )

    def test_table_covers_every_hook(self) -> None:
        """Every hook has a category in the lookup table."""
        assert tuple(cat.LIFECYCLE_CATEGORIES) == cat.LIFECYCLE_HOOKS
        assert cat.LIFECYCLE_CATEGORIES["ngDoCheck"] == "lifecycle-docheck"
