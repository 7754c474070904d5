"""Operating modes known to the terminal and their display profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

GENERAL_PURPOSE = "general-purpose"
SECURITY_ASSESSMENT = "security-assessment"
BINARY_ANALYSIS = "binary-analysis"
BUSINESS_OPERATIONS = "business-operations"
WEB_ENGINEERING = "web-engineering"
APPLICATION_ENGINEERING = "application-engineering"
PHYSICS_RESEARCH = "physics-research"

# Identifiers used by older front ends.
MODE_ALIASES: Dict[str, str] = {
    "general": GENERAL_PURPOSE,
    "red-teaming": SECURITY_ASSESSMENT,
    "reverse-engineering": BINARY_ANALYSIS,
    "business-admin": BUSINESS_OPERATIONS,
    "web-development": WEB_ENGINEERING,
    "app-development": APPLICATION_ENGINEERING,
}


@dataclass(frozen=True)
class ModeProfile:
    mode: str
    prompt: str
    capabilities: Sequence[str]

    def to_dict(self) -> Dict[str, object]:
        return {
            "mode": self.mode,
            "prompt": self.prompt,
            "capabilities": list(self.capabilities),
        }


_PROFILES: Dict[str, ModeProfile] = {
    profile.mode: profile
    for profile in (
        ModeProfile(
            GENERAL_PURPOSE,
            "aiden",
            ("General question answering", "Basic information retrieval", "Conversational assistance"),
        ),
        ModeProfile(
            SECURITY_ASSESSMENT,
            "aiden-sec",
            (
                "Security vulnerability assessment",
                "Penetration testing methodologies",
                "Defensive strategy analysis",
            ),
        ),
        ModeProfile(
            BINARY_ANALYSIS,
            "aiden-re",
            ("Code decompilation techniques", "System architecture analysis", "Protocol reconstruction"),
        ),
        ModeProfile(
            BUSINESS_OPERATIONS,
            "aiden-ba",
            ("Process optimization", "Resource allocation", "Strategic planning"),
        ),
        ModeProfile(
            WEB_ENGINEERING,
            "aiden-web",
            ("Frontend framework expertise", "Backend system design", "API integration"),
        ),
        ModeProfile(
            APPLICATION_ENGINEERING,
            "aiden-app",
            ("Mobile platform development", "Cross-platform solutions", "Performance optimization"),
        ),
        ModeProfile(
            PHYSICS_RESEARCH,
            "aiden-phys",
            (
                "Quantum mechanics modeling",
                "Theoretical physics concepts",
                "Experimental design assistance",
            ),
        ),
    )
}


def known_modes() -> List[str]:
    return list(_PROFILES)


def canonical_mode(mode: str) -> Optional[str]:
    """Return the canonical identifier for *mode*, or ``None`` if unknown."""

    key = (mode or "").strip().lower()
    key = MODE_ALIASES.get(key, key)
    return key if key in _PROFILES else None


def mode_profile(mode: str) -> ModeProfile:
    """Profile for *mode*; unknown modes get the general-purpose profile."""

    return _PROFILES[canonical_mode(mode) or GENERAL_PURPOSE]


def display_name(mode: str) -> str:
    return mode.replace("-", " ")


__all__ = [
    "APPLICATION_ENGINEERING",
    "BINARY_ANALYSIS",
    "BUSINESS_OPERATIONS",
    "GENERAL_PURPOSE",
    "MODE_ALIASES",
    "ModeProfile",
    "PHYSICS_RESEARCH",
    "SECURITY_ASSESSMENT",
    "WEB_ENGINEERING",
    "canonical_mode",
    "display_name",
    "known_modes",
    "mode_profile",
]
