import pytest

from consts import *
from models import InvalidModifier, Modifier, PreferenceProfile, merge_profiles


class TestModifier:

    @pytest.mark.parametrize("value", [-1000, 0, 1000])
    def test_bounds_are_inclusive(self, value):
        assert Modifier(value).value == value

    @pytest.mark.parametrize("value", [-1001, 1001])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidModifier):
            Modifier(value)

    def test_invalid_modifier_is_a_value_error(self):
        with pytest.raises(ValueError):
            PreferenceProfile().set_modifier(LAVA_BURST, 5000)


class TestProfile:

    def test_same_key_overwrites(self):
        p = PreferenceProfile()
        p.set_modifier(LAVA_BURST, 400)
        p.set_modifier(LAVA_BURST, 600)
        assert p.modifier_for(LAVA_BURST).value == 600
        assert len(p.modifiers) == 1

    def test_target_overlay_is_its_own_entry(self):
        p = PreferenceProfile()
        p.set_modifier(EARTH_SHOCK, 100)
        p.set_modifier(EARTH_SHOCK, 20, target=SLUDGE_BELCHER)
        assert p.modifier_for(EARTH_SHOCK).value == 100
        assert p.modifier_for(EARTH_SHOCK, SLUDGE_BELCHER).value == 20
        assert p.modifier_for(EARTH_SHOCK, SLUDGE_BELCHER).target == SLUDGE_BELCHER
        assert len(p.modifiers) == 2

    def test_effective_value_adds_overlay(self):
        p = PreferenceProfile()
        p.set_modifier(EARTH_SHOCK, 100)
        p.set_modifier(EARTH_SHOCK, -50, target=SLUDGE_BELCHER)
        assert p.effective_value(EARTH_SHOCK) == 100
        assert p.effective_value(EARTH_SHOCK, SLUDGE_BELCHER) == 50
        assert p.effective_value(EARTH_SHOCK, KNIFE_JUGGLER) == 100
        assert p.effective_value(HEX) == 0

    def test_items_are_sorted(self):
        p = PreferenceProfile()
        p.set_modifier(LAVA_BURST, 1)
        p.set_modifier(CRACKLE, 2, target=SLUDGE_BELCHER)
        p.set_modifier(CRACKLE, 3)
        # ordered by card id, unscoped before targeted
        assert [k for k, _ in p.items()] == [(LAVA_BURST, None), (CRACKLE, None), (CRACKLE, SLUDGE_BELCHER)]


class TestMerge:

    def test_later_layers_win(self):
        first = PreferenceProfile().set_modifier(LIGHTNING_BOLT, 133)
        second = PreferenceProfile().set_modifier(LIGHTNING_BOLT, 600)
        assert merge_profiles(first, second).modifier_for(LIGHTNING_BOLT).value == 600

    def test_overlay_adds_onto_earlier_layer(self):
        first = PreferenceProfile().set_modifier(EARTH_SHOCK, 20, target=SLUDGE_BELCHER)
        second = PreferenceProfile().add_overlay(EARTH_SHOCK, -50, SLUDGE_BELCHER)
        merged = merge_profiles(first, second)
        assert merged.modifier_for(EARTH_SHOCK, SLUDGE_BELCHER).value == -30

    def test_overlay_without_earlier_entry(self):
        merged = merge_profiles(PreferenceProfile(), PreferenceProfile().add_overlay(HEX, -50, SLUDGE_BELCHER))
        assert merged.modifier_for(HEX, SLUDGE_BELCHER).value == -50

    def test_overlay_sum_is_clamped(self):
        first = PreferenceProfile().set_modifier(CRACKLE, -900, target=SLUDGE_BELCHER)
        second = PreferenceProfile().add_overlay(CRACKLE, -500, SLUDGE_BELCHER)
        assert merge_profiles(first, second).modifier_for(CRACKLE, SLUDGE_BELCHER).value == -1000

    def test_set_after_overlay_overwrites(self):
        first = PreferenceProfile().set_modifier(CRACKLE, 100, target=SLUDGE_BELCHER)
        second = PreferenceProfile().add_overlay(CRACKLE, -50, SLUDGE_BELCHER).set_modifier(CRACKLE, 7, SLUDGE_BELCHER)
        assert merge_profiles(first, second).modifier_for(CRACKLE, SLUDGE_BELCHER).value == 7

    def test_unset_scalars_do_not_clear(self):
        first = PreferenceProfile(aggro=Modifier(300), draw=Modifier(50))
        second = PreferenceProfile(draw=Modifier(150))
        merged = merge_profiles(first, second)
        assert merged.aggro.value == 300
        assert merged.draw.value == 150
        assert merged.defense is None

    def test_inputs_untouched(self):
        first = PreferenceProfile().set_modifier(CRACKLE, 1)
        second = PreferenceProfile().set_modifier(CRACKLE, 2)
        merged = merge_profiles(first, second)
        merged.set_modifier(HEX, 3)
        assert first.modifier_for(CRACKLE).value == 1
        assert (HEX, None) not in first.modifiers
        assert (HEX, None) not in second.modifiers

    def test_merge_of_nothing(self):
        merged = merge_profiles()
        assert merged.modifiers == {}
        assert merged.base == BASE_PROFILE
