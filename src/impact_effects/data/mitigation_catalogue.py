"""Static planetary-defense reference tables.

Phase timelines, resource needs and coordination bodies for each mitigation
approach, plus the technology readiness list. Compiled from NASA PDCO, ESA
Space Safety, the 2010 National Academies report "Defending Planet Earth"
and UN COPUOS planetary defense guidelines.
"""

# approach -> (phases as (phase, duration, description), total duration, critical path, note)
IMPLEMENTATION_TIMELINES: dict[
    str, tuple[tuple[tuple[str, str, str], ...], str, str | None, str | None]
] = {
    "GRADUAL_DEFLECTION": (
        (
            ("Reconnaissance Mission", "1-2 years", "Detailed asteroid characterization"),
            ("Mission Design & Approval", "1-2 years", "Engineering, funding, international coordination"),
            ("Spacecraft Construction", "2-4 years", "Build and test deflection system"),
            ("Launch & Transit", "1-3 years", "Launch and journey to asteroid"),
            ("Deflection Operations", "5-20 years", "Active deflection period"),
            ("Monitoring & Adjustment", "Ongoing", "Track orbital changes"),
        ),
        "10-30 years",
        "Spacecraft construction and deflection operations",
        None,
    ),
    "RAPID_DEFLECTION": (
        (
            ("Emergency Assessment", "1-6 months", "Confirm threat and target data"),
            ("Mission Authorization", "3-6 months", "Fast-track approval process"),
            ("Spacecraft Construction", "1-2 years", "Build kinetic impactor"),
            ("Launch", "1-3 months", "Launch window preparation"),
            ("Intercept & Impact", "6 months - 2 years", "Transit and impact"),
            ("Orbit Verification", "3-12 months", "Confirm deflection success"),
        ),
        "2-5 years",
        "Spacecraft construction and launch window",
        None,
    ),
    "EMERGENCY_DEFLECTION_OR_DISRUPTION": (
        (
            ("Emergency Authorization", "1-2 weeks", "Emergency UN/government approval"),
            ("Rapid Spacecraft Preparation", "2-6 months", "Use existing hardware or rapid build"),
            ("Launch", "1-4 weeks", "Immediate launch"),
            ("Intercept Mission", "1-6 months", "Fast transit to target"),
            ("Civil Defense Parallel Track", "Simultaneous", "Evacuations and preparations"),
        ),
        "3-12 months",
        "Every phase is critical - no margin for error",
        "Success probability is low - civil defense is primary strategy",
    ),
    "LAST_RESORT_DISRUPTION": (
        (
            ("Emergency Decision", "24-48 hours", "Decide to attempt disruption"),
            ("Prepare Available Assets", "1-4 weeks", "Use any available launch capability"),
            ("Launch & Intercept", "1-4 weeks", "Immediate intercept attempt"),
            ("Primary Focus: Civil Defense", "All remaining time", "Evacuations and shelter"),
        ),
        "2-8 weeks",
        "Civil defense is primary strategy",
        "Deflection attempt has very low probability of success",
    ),
    "CIVIL_DEFENSE_ONLY": (
        (
            ("Emergency Declaration", "Immediate", "Declare state of emergency"),
            ("Evacuation", "All available time", "Mass evacuation of impact zone"),
            ("Shelter Preparation", "Parallel", "For those who cannot evacuate"),
            ("Emergency Services", "Ongoing", "Position resources for response"),
            ("Impact & Response", "Post-impact", "Search, rescue, recovery"),
        ),
        "All remaining time",
        None,
        "Insufficient time for deflection - focus entirely on saving lives",
    ),
}

_CIVIL_DEFENSE_RESOURCES: dict[str, str | list[str]] = {
    "financial": "$10-100+ billion (civil defense)",
    "technical": [
        "Mass communication systems",
        "Transportation networks",
        "Shelter infrastructure",
        "Emergency medical systems",
        "Post-impact recovery equipment",
    ],
    "personnel": "Millions - government, military, emergency services, volunteers",
    "international": [
        "UN disaster response activation",
        "International humanitarian aid",
        "Refugee assistance",
        "Medical and supply support",
        "Post-impact reconstruction",
    ],
    "infrastructure": [
        "Evacuation routes and transportation",
        "Shelter facilities",
        "Emergency supply stockpiles",
        "Medical facilities",
        "Communication networks",
        "Post-impact recovery equipment",
    ],
}

RESOURCE_REQUIREMENTS: dict[str, dict[str, str | list[str]]] = {
    "GRADUAL_DEFLECTION": {
        "financial": "$5-20 billion",
        "technical": [
            "Advanced ion propulsion systems",
            "Deep space communications",
            "Precision navigation",
            "Long-duration spacecraft operations",
            "Nuclear power sources (for some methods)",
        ],
        "personnel": "500-2000 scientists, engineers, mission specialists",
        "international": [
            "UN Committee on the Peaceful Uses of Outer Space (COPUOS)",
            "International Asteroid Warning Network (IAWN)",
            "Space Mission Planning Advisory Group (SMPAG)",
            "Multiple space agencies (NASA, ESA, JAXA, etc.)",
            "International funding consortium",
        ],
        "infrastructure": [
            "Launch facilities",
            "Deep space network communications",
            "Mission control centers",
            "Spacecraft manufacturing facilities",
            "Testing and simulation facilities",
        ],
    },
    "RAPID_DEFLECTION": {
        "financial": "$1-5 billion",
        "technical": [
            "Kinetic impactor spacecraft",
            "Precision guidance systems",
            "Heavy-lift launch vehicles",
            "Real-time tracking network",
            "Impact verification systems",
        ],
        "personnel": "200-500 mission specialists",
        "international": [
            "Emergency UN authorization",
            "International space agencies coordination",
            "Global tracking network access",
            "Launch facility cooperation",
        ],
        "infrastructure": [
            "Immediate launch capability",
            "Existing spacecraft or rapid manufacturing",
            "Global tracking stations",
            "Mission operations centers",
        ],
    },
    "EMERGENCY_DEFLECTION_OR_DISRUPTION": {
        "financial": "$2-10 billion",
        "technical": [
            "Nuclear device (if nuclear option)",
            "Emergency launch capability",
            "Minimal testing protocols",
            "Real-time guidance systems",
            "Fragment tracking capability",
        ],
        "personnel": "100-300 emergency response team",
        "international": [
            "Emergency UN Security Council approval",
            "Nuclear weapons state cooperation (if nuclear)",
            "International legal waivers",
            "Global civil defense coordination",
        ],
        "infrastructure": [
            "Any available launch system",
            "Emergency manufacturing",
            "Military logistics support",
            "Civil defense infrastructure",
        ],
    },
    "LAST_RESORT_DISRUPTION": _CIVIL_DEFENSE_RESOURCES,
    "CIVIL_DEFENSE_ONLY": _CIVIL_DEFENSE_RESOURCES,
}

KEY_ORGANIZATIONS: list[str] = [
    "United Nations Office for Outer Space Affairs (UNOOSA)",
    "International Asteroid Warning Network (IAWN)",
    "Space Mission Planning Advisory Group (SMPAG)",
    "International Council of Scientific Unions (ICSU)",
    "National space agencies (NASA, ESA, Roscosmos, CNSA, JAXA, ISRO)",
]

REQUIRED_AGREEMENTS: list[str] = [
    "Outer Space Treaty compliance (or emergency waiver)",
    "Nuclear Test Ban Treaty considerations (if nuclear option)",
    "Liability Convention protocols",
    "Registration Convention compliance",
    "Rescue Agreement activation",
]

# coordination urgency -> decision-making process
DECISION_PROCESSES: dict[str, str] = {
    "URGENT": "Emergency UN Security Council session with fast-track approval",
    "HIGH": "UN General Assembly with COPUOS technical review",
    "NORMAL": "Standard international space mission approval process",
}

FUNDING_MODEL: dict[str, str] = {
    "primary": "Affected nations and major space powers",
    "secondary": "International burden-sharing based on GDP",
    "emergency": "Global solidarity fund for planetary defense",
}

LEGAL_FRAMEWORK: dict[str, str] = {
    "mission_approval": "UN authorization required",
    "liability": "Shared under international protocols",
    "nuclear_use": "Requires Security Council unanimous approval",
    "data_sharing": "Mandatory transparency for all tracking data",
}

TECHNOLOGY_STATUS: dict[str, list[str]] = {
    "ready_now": [
        "Kinetic impactor (TRL 9 - DART mission success)",
        "Asteroid reconnaissance missions (TRL 9)",
        "Ground-based detection (TRL 9)",
        "Orbital tracking (TRL 9)",
    ],
    "near_term_ready": [
        "Gravity tractor (TRL 6-7)",
        "Enhanced kinetic impactor (TRL 6)",
        "Nuclear standoff burst (TRL 5-6)",
    ],
    "long_term_development": [
        "Ion beam deflection (TRL 4-5)",
        "Laser ablation (TRL 2-3)",
        "Mass driver (TRL 2-3)",
        "Solar sail attachment (TRL 3-4)",
    ],
}

CURRENT_CAPABILITIES: dict[str, dict] = {
    "detection": {
        "ground_based_telescopes": [
            "Pan-STARRS (Hawaii)",
            "Catalina Sky Survey (Arizona)",
            "ATLAS (Hawaii)",
            "Spacewatch (Arizona)",
            "LINEAR (New Mexico)",
        ],
        "space_based_systems": [
            "NEOWISE (NASA infrared space telescope)",
            "Future: NEO Surveyor mission (planned)",
        ],
        "detection_limit": "~140 meters for 90% completeness",
        "tracking_accuracy": "Orbital uncertainty: ±1000 km (improves with time)",
        "warning_time": {
            "optimal": "10-50 years for large asteroids",
            "current": "0-20 years (depends on discovery)",
            "goal": "100+ years through improved detection",
        },
    },
    "international_coordination": {
        "iawn": {
            "name": "International Asteroid Warning Network",
            "role": "Detect, track, and characterize NEOs",
            "members": "20+ observatories worldwide",
        },
        "smpag": {
            "name": "Space Mission Planning Advisory Group",
            "role": "Plan and coordinate deflection missions",
            "members": "18 space agencies",
        },
        "pdc": {
            "name": "Planetary Defense Conference",
            "role": "Biennial meeting to discuss NEO threats",
            "status": "Active since 2004",
        },
    },
}

MITIGATION_PRINCIPLES: dict[str, dict] = {
    "early_detection": {
        "principle": "Earlier detection = more options and higher success probability",
        "goal": "Detect all potentially hazardous asteroids decades before potential impact",
        "current_gap": "Only ~40% of 140m+ NEOs have been discovered",
        "recommendation": "Increase funding for detection programs",
    },
    "graduated_response": {
        "principle": "Use the least disruptive method that will be effective",
        "hierarchy": [
            "1st choice: Gentle deflection (gravity tractor, ion beam)",
            "2nd choice: Kinetic impact",
            "3rd choice: Nuclear standoff",
            "Last resort: Disruption (high risk)",
        ],
    },
    "deflection_not_disruption": {
        "principle": "Deflection is always preferred over disruption",
        "reason": "Disruption creates multiple impacts instead of one",
        "exception": "Only if deflection is impossible and fragments would be survivable",
    },
    "civil_defense_always": {
        "principle": "Civil defense preparations must accompany any deflection attempt",
        "reason": "Deflection missions may fail - must have backup plan",
        "components": "Evacuation, shelter, emergency response, recovery",
    },
    "international_cooperation": {
        "principle": "Asteroid threats are global - response must be coordinated",
        "requirement": "No nation can act unilaterally on planetary defense",
        "framework": "UN-led international coordination",
    },
}

REFERENCES: list[str] = [
    "NASA Planetary Defense Coordination Office (PDCO)",
    "ESA Space Situational Awareness Programme",
    "NASA DART Mission Results (2022)",
    "National Academies Report: Defending Planet Earth (2010)",
    "UN COPUOS Guidelines for Planetary Defense",
    "International Academy of Astronautics Position Paper on Planetary Defense",
    "B612 Foundation Asteroid Institute Research",
]
