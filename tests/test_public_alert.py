"""Tests for public alert levels and template wording."""

import pytest

from builders import make_asteroid
from skywatch.models import AlertLevel, PublicAlertData
from skywatch.public_alert import (
    BANNED_WORDS,
    BannedWordError,
    alert_data_from_asteroid,
    build_public_alert,
    determine_alert_level,
    generate_public_alert,
    validate_no_banned_words,
)
from skywatch.thresholds import AU_KM


def _data(**overrides):
    fields = {
        "asteroid_name": "2024 AB",
        "distance_au": 0.3,
        "diameter_meters": 50.0,
        "velocity_km_s": 10.0,
    }
    fields.update(overrides)
    return PublicAlertData(**fields)


class TestAlertLevel:

    @pytest.mark.parametrize("overrides", [
        {"diameter_meters": 600.0},
        {"is_sentry_monitored": True},
        {"velocity_km_s": 35.0},
        {"is_potentially_hazardous": True, "diameter_meters": 250.0},
    ])
    def test_scientific_interest(self, overrides):
        assert determine_alert_level(_data(**overrides)) is AlertLevel.SCIENTIFIC_INTEREST

    @pytest.mark.parametrize("overrides", [
        {"diameter_meters": 120.0},
        {"distance_au": 0.002},
        {"pei_value": 60.0},
        {"velocity_km_s": 22.0},
        {"is_potentially_hazardous": True, "diameter_meters": 150.0},
    ])
    def test_monitoring_watch(self, overrides):
        assert determine_alert_level(_data(**overrides)) is AlertLevel.MONITORING_WATCH

    def test_informational(self):
        assert determine_alert_level(_data()) is AlertLevel.INFORMATIONAL

    def test_internal_scores_alone_do_not_escalate(self):
        assert determine_alert_level(_data(risk_score=0.99, pei_value=10.0)) is AlertLevel.INFORMATIONAL


class TestTemplateMessage:

    def test_close_pass_in_lunar_distances(self):
        message = generate_public_alert(_data(distance_au=0.002))

        assert message.startswith("Asteroid 2024 AB is being tracked by global monitoring networks.")
        assert "approximately 0.8 times the Earth-Moon distance" in message
        assert "relatively close in astronomical terms" in message

    def test_far_pass_compared_to_the_moon(self):
        message = generate_public_alert(_data(distance_au=0.3))

        assert "about 117 times farther away than the Moon" in message
        assert "far beyond any area of concern" in message

    @pytest.mark.parametrize("diameter,fragment", [
        (5.0, "burn up entirely"),
        (30.0, "large building"),
        (120.0, "stadium-sized"),
        (300.0, "continuous scientific observation"),
        (900.0, "planetary defense"),
    ])
    def test_size_description(self, diameter, fragment):
        assert fragment in generate_public_alert(_data(diameter_meters=diameter))

    def test_sentry_reassurance_wins_over_hazard_label(self):
        message = generate_public_alert(_data(is_sentry_monitored=True, is_potentially_hazardous=True))

        assert "Sentry" in message
        assert "precautionary label" not in message

    def test_hazard_label_is_explained(self):
        assert "precautionary label" in generate_public_alert(_data(is_potentially_hazardous=True))

    def test_internal_scores_never_appear(self):
        message = generate_public_alert(_data(risk_score=0.73, pei_value=42.0))

        assert "0.73" not in message
        assert "42" not in message

    def test_build_public_alert(self):
        alert = build_public_alert(_data(diameter_meters=600.0))

        assert alert.alert_level is AlertLevel.SCIENTIFIC_INTEREST
        assert alert.language == "English"
        assert alert.message == generate_public_alert(_data(diameter_meters=600.0))


class TestBannedWords:

    def test_banned_word_raises(self):
        with pytest.raises(BannedWordError) as excinfo:
            validate_no_banned_words("The rock could strike the coast.")
        assert excinfo.value.word == "strike"

    def test_check_is_case_insensitive(self):
        with pytest.raises(BannedWordError):
            validate_no_banned_words("No PANIC is warranted.")

    def test_banned_word_error_is_value_error(self):
        assert issubclass(BannedWordError, ValueError)

    def test_words_inside_other_words_pass(self):
        validate_no_banned_words("A white, whimsical object with a smooth orbit.")

    def test_allowed_name_is_skipped(self):
        validate_no_banned_words("Asteroid 3102 Hitchcock is being tracked.", allowed="3102 Hitchcock")

    def test_allowed_name_does_not_hide_other_words(self):
        with pytest.raises(BannedWordError):
            validate_no_banned_words("3102 Hitchcock poses no threat.", allowed="3102 Hitchcock")

    def test_template_passes_for_every_combination(self):
        for sentry in (False, True):
            for hazardous in (False, True):
                message = generate_public_alert(
                    _data(is_sentry_monitored=sentry, is_potentially_hazardous=hazardous)
                ).lower()
                for word in BANNED_WORDS:
                    assert f" {word} " not in f" {message} "


class TestAlertDataFromAsteroid:

    def test_maps_asteroid_figures(self):
        asteroid = make_asteroid(sentry_flag=True, potentially_hazardous_flag=True)

        data = alert_data_from_asteroid(asteroid)

        assert data.asteroid_name == "433 Eros"
        assert data.diameter_meters == pytest.approx(300.0)
        assert data.distance_au == pytest.approx(1_000_000 / AU_KM)
        assert data.velocity_km_s == 12.0
        assert data.is_sentry_monitored is True
        assert data.is_potentially_hazardous is True
        assert data.risk_score is None
