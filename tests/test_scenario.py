from armory.domain.scenario import Scenario, normalize_zone


def test_from_inputs_parses_form_values() -> None:
    scenario = Scenario.from_inputs("15", "Head", "62.5")
    assert scenario == Scenario(duration=15.0, zone="head", pellet_hit_pct=62.5)


def test_from_inputs_falls_back_on_blank_or_zero_duration() -> None:
    assert Scenario.from_inputs("", None, None).duration == 10.0
    assert Scenario.from_inputs("0", None, None).duration == 10.0
    assert Scenario.from_inputs("abc", None, None).duration == 10.0


def test_from_inputs_keeps_zero_pellet_percentage() -> None:
    assert Scenario.from_inputs(None, None, "0").pellet_hit_pct == 0.0
    assert Scenario.from_inputs(None, None, "nope").pellet_hit_pct == 100.0


def test_unknown_zone_normalizes_to_none() -> None:
    assert normalize_zone("feet") == "none"
    assert normalize_zone(3) == "none"
    assert normalize_zone(" TORSO ") == "torso"
