"""
Skill requirements inferred from job categories.
"""

from typing import Dict, List, Optional

# Category keyword -> skills any one of which qualifies a technician
JOB_SKILL_MAP: Dict[str, List[str]] = {
    "HVAC": ["HVAC", "Heating", "Cooling", "AC"],
    "Plumbing": ["Plumbing", "Drains", "Water Heater"],
    "Electrical": ["Electrical", "Wiring", "Panel"],
    "Appliance": ["Appliance", "Repair"],
    "General": [],
}


def required_skills_for(category: Optional[str]) -> List[str]:
    """Get the skills a job category calls for; empty when any tech will do."""
    category = (category or "General").lower()
    for keyword, skills in JOB_SKILL_MAP.items():
        if keyword.lower() in category:
            return list(skills)
    return []


def matches_any_skill(required: List[str], offered: List[str]) -> bool:
    """Case-insensitive substring match of any required skill against offered ones."""
    return any(
        skill.lower() in candidate.lower() for skill in required for candidate in offered
    )
