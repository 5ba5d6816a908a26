"""
Mock data loaded into the in-memory store at startup.
"""

from datetime import timedelta
from typing import List

from .models.pet import PetProfile
from .models.resource import CareTip, Resource, ResourceSection
from .models.triage import DiagnosisStatus, DiagnosisSummary, utcnow


def mock_pets() -> List[PetProfile]:
    return [
        PetProfile(
            name="Luna", species="Canine", age=4, weight="18",
            allergies="Seasonal pollen", notes="Responds well to inhaler therapy."
        ),
        PetProfile(
            name="Atlas", species="Feline", age=7, weight="6",
            allergies="Chicken", notes="Prefers pill pockets for medication."
        ),
        PetProfile(
            name="Nova", species="Canine", age=2, weight="22",
            allergies="None", notes="High energy, monitor post-op activity."
        ),
    ]


def mock_analyses() -> List[DiagnosisSummary]:
    """Recent analyses, oldest first."""
    now = utcnow()
    return [
        DiagnosisSummary(
            pet_name="Nova",
            brief="Elevated temperature trending upward, watch closely.",
            created_at=now - timedelta(days=1, hours=2),
            status=DiagnosisStatus.URGENT,
            notes=["Re-run vitals in clinic", "Consider anti-inflammatory protocol"]
        ),
        DiagnosisSummary(
            pet_name="Atlas",
            brief="Mild GI distress detected from symptom clustering.",
            created_at=now - timedelta(hours=1),
            status=DiagnosisStatus.MONITOR,
            notes=["Recommend bland diet for 24 hours", "Flag recurrence for deeper scan"]
        ),
        DiagnosisSummary(
            pet_name="Luna",
            brief="Respiratory rate normalized after bronchodilator therapy.",
            created_at=now - timedelta(minutes=20),
            status=DiagnosisStatus.STABLE,
            notes=["Continue monitoring at-home inhaler usage", "Schedule follow-up in 48 hours"]
        ),
    ]


def mock_resources() -> List[Resource]:
    return [
        Resource(
            title="Post-operative respiratory care",
            summary="Checklist for supporting patients after airway procedures.",
            sections=[
                ResourceSection(title="Immediate care", points=[
                    "Monitor respiratory effort every 15 minutes for the first hour.",
                    "Provide humidified oxygen if saturation drops below 94%."
                ]),
                ResourceSection(title="At-home guidance", points=[
                    "Share step-down steroid tapering schedule with caregivers.",
                    "Provide emergency triggers that should prompt clinic contact."
                ])
            ]
        ),
        Resource(
            title="GI distress stabilization",
            summary="Evidence-based interventions for acute gastrointestinal flare-ups.",
            sections=[
                ResourceSection(title="Intake considerations", points=[
                    "Recommend bland diet transition over 12 hours.",
                    "Encourage small, frequent hydration intervals."
                ]),
                ResourceSection(title="Follow-up", points=[
                    "Schedule recheck if symptoms persist beyond 24 hours.",
                    "Collect stool sample for lab analysis if bleeding occurs."
                ])
            ]
        ),
    ]


def mock_care_tips() -> List[CareTip]:
    return [
        CareTip(
            category="Hydration",
            title="Monitor fluid intake",
            description="Encourage regular hydration post-treatment to support renal "
                        "function and avoid dehydration."
        ),
        CareTip(
            category="Mobility",
            title="Gradual exercise",
            description="Plan two short leash walks with light stretching to rebuild "
                        "muscle without overexertion."
        ),
        CareTip(
            category="Nutrition",
            title="High-protein snacks",
            description="Offer small, protein-rich snacks spaced throughout the day to "
                        "maintain energy between meals."
        ),
    ]
