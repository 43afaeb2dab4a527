"""Tests for layer composition: inclusion rules, ordering, purity and memoization."""

import itertools

import pytest

from sitmap.models.layers import LAYER_ORDER, LayerKind, LayerToggleState
from sitmap.models.results import AnalyticalResultBundle, Domain
from sitmap.rendering.composer import LayerComposer, compose_layers


def _kinds(layers):
    return [layer.kind for layer in layers]


class TestComposeLayers:
    """Test the pure compose_layers function."""

    def test_all_inputs_present_gives_every_kind_in_order(self, all_on, full_results, geometry):
        layers = compose_layers(all_on, full_results, None, geometry, 1.0)
        assert _kinds(layers) == list(LAYER_ORDER)

    def test_all_toggles_off_gives_nothing(self, full_results, geometry):
        layers = compose_layers(LayerToggleState.all_off(), full_results, None, geometry, 1.0)
        assert layers == []

    @pytest.mark.parametrize("domains", [
        combo
        for size in range(len(Domain) + 1)
        for combo in itertools.combinations(list(Domain), size)
    ])
    @pytest.mark.parametrize("with_geometry", [True, False])
    def test_order_and_uniqueness_for_every_domain_subset(
        self, all_on, full_results, geometry, domains, with_geometry
    ):
        bundle = AnalyticalResultBundle(**{d.value: full_results.get(d) for d in domains})
        layers = compose_layers(all_on, bundle, None, geometry if with_geometry else None, 1.0)
        kinds = _kinds(layers)

        assert len(kinds) == len(set(kinds))
        assert kinds == [k for k in LAYER_ORDER if k in kinds]

        present = set(domains)
        expected = {
            LayerKind.CHOROPLETH: with_geometry,
            LayerKind.CONFLICT: Domain.GEOPOLITICS in present,
            LayerKind.FOOD_DESERT: with_geometry and Domain.FOOD_SUPPLY in present,
            LayerKind.INFRASTRUCTURE: Domain.INFRASTRUCTURE in present,
            LayerKind.TRADE_ARCS: bool({Domain.ECONOMY, Domain.FOOD_SUPPLY} & present),
            LayerKind.DISPLACEMENT_ARCS: Domain.CIVILIAN_IMPACT in present,
            LayerKind.HEATMAP: True,
        }
        assert set(kinds) == {kind for kind, included in expected.items() if included}

    @pytest.mark.parametrize("kind", list(LayerKind))
    def test_single_toggle_controls_single_kind(self, full_results, geometry, kind):
        toggles = LayerToggleState.all_off().with_toggle(kind, True)
        layers = compose_layers(toggles, full_results, None, geometry, 1.0)
        assert _kinds(layers) == [kind]

    def test_trade_arcs_with_economy_only(self, economy):
        toggles = LayerToggleState.all_off().with_toggle(LayerKind.TRADE_ARCS, True)
        bundle = AnalyticalResultBundle(economy=economy)

        layers = compose_layers(toggles, bundle)

        assert _kinds(layers) == [LayerKind.TRADE_ARCS]
        assert [row["origin"] for row in layers[0].data] == ["economy"]

    def test_missing_geometry_suppresses_geometry_layers(self, all_on, full_results):
        kinds = _kinds(compose_layers(all_on, full_results, None, None, 1.0))
        assert LayerKind.CHOROPLETH not in kinds
        assert LayerKind.FOOD_DESERT not in kinds

    def test_empty_bundle_still_yields_degenerate_heatmap(self, all_on, empty_results):
        layers = compose_layers(all_on, empty_results)
        assert _kinds(layers) == [LayerKind.HEATMAP]
        assert layers[0].data == []

    def test_deterministic(self, all_on, full_results, geometry):
        first = compose_layers(all_on, full_results, "UKR", geometry, 1.1)
        second = compose_layers(all_on, full_results, "UKR", geometry, 1.1)
        assert first == second

    def test_selection_only_changes_choropleth_highlight(self, all_on, full_results, geometry):
        before = compose_layers(all_on, full_results, None, geometry, 1.0)
        after = compose_layers(all_on, full_results, "SDN", geometry, 1.0)

        for old, new in zip(before, after):
            if old.kind is LayerKind.CHOROPLETH:
                assert old.data == new.data
                assert old.style["highlighted_object_index"] == -1
                assert new.style["highlighted_object_index"] == 1
                assert new.style["selected_region_id"] == "SDN"
            else:
                assert old == new

    def test_custom_registry_replaces_builder(self, all_on, full_results, geometry):
        from sitmap.models.layers import LayerDescriptor
        from sitmap.rendering.composer import LAYER_REGISTRY, LayerSpec

        registry = dict(LAYER_REGISTRY)
        registry[LayerKind.HEATMAP] = LayerSpec(
            available=lambda i: True,
            select_inputs=lambda i: (),
            build=lambda: LayerDescriptor(
                kind=LayerKind.HEATMAP, layer_type="HexagonLayer", layer_id="hex", data=[]
            ),
        )

        layers = compose_layers(all_on, full_results, None, geometry, 1.0, registry=registry)

        assert layers[-1].layer_type == "HexagonLayer"
        assert _kinds(layers) == list(LAYER_ORDER)


class TestLayerComposer:
    """Test memoization in LayerComposer."""

    def test_unchanged_inputs_return_same_list(self, all_on, full_results, geometry):
        composer = LayerComposer()
        first = composer.compose(all_on, full_results, None, geometry, 1.0)
        second = composer.compose(all_on, full_results, None, geometry, 1.0)
        assert second is first

    def test_equal_but_new_inputs_reuse_descriptors(self, all_on, full_results, geometry):
        composer = LayerComposer()
        first = composer.compose(all_on, full_results, None, geometry, 1.0)
        second = composer.compose(
            LayerToggleState.all_on(),
            full_results.model_copy(),
            None,
            geometry.model_copy(),
            1.0,
        )
        assert all(a is b for a, b in zip(first, second))

    def test_unrelated_toggle_keeps_heatmap_descriptor(self, all_on, full_results, geometry):
        composer = LayerComposer()
        first = composer.compose(all_on, full_results, None, geometry, 1.0)
        second = composer.compose(
            all_on.with_toggle(LayerKind.INFRASTRUCTURE, False), full_results, None, geometry, 1.0
        )

        heat_before = next(l for l in first if l.kind is LayerKind.HEATMAP)
        heat_after = next(l for l in second if l.kind is LayerKind.HEATMAP)
        assert heat_after is heat_before
        assert LayerKind.INFRASTRUCTURE not in _kinds(second)

    def test_pulse_frame_rebuilds_only_conflict(self, all_on, full_results, geometry):
        composer = LayerComposer()
        first = composer.compose(all_on, full_results, None, geometry, 1.0)
        second = composer.compose(all_on, full_results, None, geometry, 1.02)

        for old, new in zip(first, second):
            if old.kind is LayerKind.CONFLICT:
                assert new is not old
                assert new.style["radius_scale"] == 1.02
            else:
                assert new is old

    def test_selection_rebuilds_only_choropleth(self, all_on, full_results, geometry):
        composer = LayerComposer()
        first = composer.compose(all_on, full_results, None, geometry, 1.0)
        second = composer.compose(all_on, full_results, "UKR", geometry, 1.0)

        rebuilt = [new.kind for old, new in zip(first, second) if new is not old]
        assert rebuilt == [LayerKind.CHOROPLETH]

    def test_matches_pure_composition(self, all_on, full_results, geometry):
        composer = LayerComposer()
        assert composer.compose(all_on, full_results, "YEM", geometry, 0.9) == compose_layers(
            all_on, full_results, "YEM", geometry, 0.9
        )

    def test_invalidate_forces_rebuild(self, all_on, full_results, geometry):
        composer = LayerComposer()
        first = composer.compose(all_on, full_results, None, geometry, 1.0)
        composer.invalidate()
        second = composer.compose(all_on, full_results, None, geometry, 1.0)
        assert second == first
        assert all(a is not b for a, b in zip(first, second))
