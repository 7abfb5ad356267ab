from cpufeat.loongarch import LoongArchFeature, LoongArchInfo


def test_feature_count_matches_enum():
    info = LoongArchInfo(features=frozenset(LoongArchFeature))
    assert sum(1 for feature in LoongArchFeature if info.has(feature)) == 14


def test_feature_order():
    features = list(LoongArchFeature)
    assert LoongArchFeature(features[0].value) is LoongArchFeature.CPUCFG
    assert LoongArchFeature(features[-1].value) is LoongArchFeature.PTW


def test_feature_values_unique():
    looked_up = [LoongArchFeature(feature.value) for feature in LoongArchFeature]
    assert looked_up == list(LoongArchFeature)
    assert len(set(looked_up)) == 14


def test_lookup_by_value():
    assert LoongArchFeature("lbt_mips") is LoongArchFeature.LBT_MIPS


def test_has():
    info = LoongArchInfo(features=frozenset({LoongArchFeature.LSX, LoongArchFeature.LASX}))
    assert info.has(LoongArchFeature.LSX)
    assert info.has(LoongArchFeature.LASX)
    assert not info.has(LoongArchFeature.CPUCFG)


def test_default_info_is_empty():
    info = LoongArchInfo()
    assert not any(info.has(feature) for feature in LoongArchFeature)


def test_info_equality_ignores_construction_order():
    first = LoongArchInfo(features=frozenset([LoongArchFeature.LAM, LoongArchFeature.UAL]))
    second = LoongArchInfo(features=frozenset([LoongArchFeature.UAL, LoongArchFeature.LAM]))
    assert first == second