"""Built-in sample batch for demos and the batch report.

Times are relative to ``now`` so the sample always sits in the future.
Most events are deliberately routine: a healthy run suppresses the bulk of
them.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from skywatch.models import (
    AsteroidInput,
    ConjunctionInput,
    DebrisInput,
    InterpretationRequest,
    OrbitRegime,
    PrimaryObject,
    PrimaryObjectType,
    SecondaryObject,
    SecondaryObjectType,
    SystemContext,
)


def sample_asteroids(now: datetime) -> list[AsteroidInput]:
    return [
        AsteroidInput(
            object_id="3542519",
            name="(2010 PK9)",
            diameter_min_km=0.01,
            diameter_max_km=0.02,
            velocity_km_s=15.0,
            miss_distance_km=5_000_000.0,
            approach_time=now + timedelta(days=1),
            potentially_hazardous_flag=False,
        ),
        AsteroidInput(
            object_id="2099942",
            name="99942 Apophis (2004 MN4)",
            diameter_min_km=0.31,
            diameter_max_km=0.37,
            velocity_km_s=7.4,
            miss_distance_km=38_000.0,
            approach_time=now + timedelta(days=5),
            observation_age_hours=12.0,
            orbital_uncertainty=800.0,
            potentially_hazardous_flag=True,
            sentry_flag=True,
        ),
        AsteroidInput(
            object_id="54016485",
            name="(2020 QG)",
            diameter_min_km=0.002,
            diameter_max_km=0.005,
            velocity_km_s=12.3,
            miss_distance_km=9_300.0,
            approach_time=now + timedelta(hours=30),
            potentially_hazardous_flag=False,
        ),
        AsteroidInput(
            object_id="3843474",
            name="(2019 OK)",
            diameter_min_km=0.057,
            diameter_max_km=0.13,
            velocity_km_s=24.5,
            miss_distance_km=1_500_000.0,
            approach_time=now + timedelta(days=3),
            observation_age_hours=200.0,
            potentially_hazardous_flag=False,
        ),
    ]


def sample_conjunctions(now: datetime) -> list[ConjunctionInput]:
    iss = PrimaryObject(norad_id=25544, name="ISS (ZARYA)", object_type=PrimaryObjectType.ISS, orbit_regime=OrbitRegime.LEO)
    return [
        ConjunctionInput(
            primary_object=iss,
            secondary_object=SecondaryObject(norad_id=49863, name="COSMOS 1408 DEB", object_type=SecondaryObjectType.DEBRIS),
            tca=now + timedelta(hours=30),
            miss_distance_km=8.2,
            relative_velocity_km_s=11.4,
            probability_of_collision=2e-6,
            lead_time_hours=30.0,
            maneuver_possible=True,
        ),
        ConjunctionInput(
            primary_object=PrimaryObject(
                norad_id=44713, name="STARLINK-1007", object_type=PrimaryObjectType.SATELLITE, orbit_regime=OrbitRegime.LEO,
            ),
            secondary_object=SecondaryObject(norad_id=33773, name="IRIDIUM 33 DEB", object_type=SecondaryObjectType.DEBRIS),
            tca=now + timedelta(hours=3),
            miss_distance_km=0.4,
            relative_velocity_km_s=14.1,
            probability_of_collision=3e-4,
            lead_time_hours=3.0,
            maneuver_possible=True,
        ),
        ConjunctionInput(
            primary_object=PrimaryObject(
                norad_id=28884, name="GALAXY 15", object_type=PrimaryObjectType.SATELLITE, orbit_regime=OrbitRegime.GEO,
            ),
            secondary_object=SecondaryObject(norad_id=99001, name="UNKNOWN OBJECT", object_type=SecondaryObjectType.UNKNOWN),
            tca=now + timedelta(days=4),
            miss_distance_km=180.0,
            relative_velocity_km_s=0.2,
            lead_time_hours=96.0,
            maneuver_possible=True,
        ),
    ]


def sample_debris(now: datetime) -> list[DebrisInput]:
    return [
        DebrisInput(
            id="2024-001B",
            name="CZ-5B R/B",
            mass_kg=22_000.0,
            predicted_reentry_time=now + timedelta(hours=1),
            uncertainty_minutes=10.0,
            data_age_hours=1.0,
            inclination_deg=41.5,
        ),
        DebrisInput(
            id="1998-067WX",
            name="ISS DEB",
            mass_kg=4.0,
            predicted_reentry_time=now + timedelta(hours=12),
            uncertainty_minutes=90.0,
            data_age_hours=6.0,
        ),
        DebrisInput(
            id="2023-155A",
            name="PROGRESS MS-25",
            mass_kg=7_000.0,
            predicted_reentry_time=now + timedelta(hours=20),
            uncertainty_minutes=5.0,
            data_age_hours=2.0,
            is_controlled_reentry=True,
        ),
        DebrisInput(
            id="2019-074AB",
            mass_kg=260.0,
            predicted_reentry_time=now + timedelta(days=20),
            uncertainty_minutes=720.0,
            data_age_hours=24.0,
        ),
    ]


def sample_request(now: datetime) -> InterpretationRequest:
    return InterpretationRequest(
        asteroids=sample_asteroids(now),
        conjunctions=sample_conjunctions(now),
        debris=sample_debris(now),
        context=SystemContext(current_time=now),
    )
