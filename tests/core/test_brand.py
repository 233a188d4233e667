"""Brand Config Store: tests for merge semantics and logo line resolution."""

from storefront.core.brand import BrandConfigStore, parse_logo_lines, resolve_logo_lines
from storefront.core.domain_types import ColorSlot
from storefront.core.seed_data import default_brand


def test_default_brand_when_slot_empty(storage):
    assert BrandConfigStore(storage).get() == default_brand()


def test_set_name_leaves_colors_and_logo_lines(storage):
    brand = BrandConfigStore(storage)
    before = brand.get()

    updated = brand.set(name="X")

    assert updated.name == "X"
    assert updated.colors == before.colors
    assert updated.logo_lines == before.logo_lines


def test_set_colors_merges_per_slot(storage):
    brand = BrandConfigStore(storage)
    updated = brand.set(colors={"odGreen": "#556B2F"})
    assert updated.colors[ColorSlot.OD_GREEN] == "#556B2F"
    assert updated.colors[ColorSlot.BLACK] == "#111111"


def test_set_persists_across_instances(storage):
    BrandConfigStore(storage).set(name="Persisted", logo_lines=["white"])
    reloaded = BrandConfigStore(storage).get()
    assert reloaded.name == "Persisted"
    assert reloaded.logo_lines == ["white"]


def test_unknown_logo_slot_is_stored(storage):
    brand = BrandConfigStore(storage)
    brand.set(logo_lines=["black", "chartreuse"])
    assert BrandConfigStore(storage).get().logo_lines == ["black", "chartreuse"]


def test_set_with_nothing_does_not_write(storage):
    BrandConfigStore(storage).set()
    assert storage.writes == 0


def test_resolve_skips_unknown_slots_and_keeps_order():
    config = default_brand().model_copy(update={"logo_lines": ["white", "nope", "black"]})
    assert resolve_logo_lines(config) == [("white", "#FFFFFF"), ("black", "#111111")]


def test_parse_logo_lines_trims_and_drops_empties():
    assert parse_logo_lines(" black, odGreen ,, white ") == ["black", "odGreen", "white"]
    assert parse_logo_lines("") == []
