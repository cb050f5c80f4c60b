from enum import Enum

class Section(str, Enum):
    ESTEEM = "ESTEEM"
    TRUST = "TRUST"
    DRIVER = "DRIVER"
    ADAPTABILITY = "ADAPTABILITY"
    PROBLEM_RESOLUTION = "PROBLEM_RESOLUTION"
    COACHABILITY = "COACHABILITY"

class SubSection(str, Enum):
    INSECURE = "INSECURE"
    PRIDE = "PRIDE"
    TRUSTING = "TRUSTING"
    CAUTIOUS = "CAUTIOUS"
    HUSTLE = "HUSTLE"
    RESERVED = "RESERVED"
    FLEXIBLE = "FLEXIBLE"
    PRECISE = "PRECISE"
    DIRECT = "DIRECT"
    AVOIDANT = "AVOIDANT"
    COACHABILITY = "COACHABILITY"

class RaterType(str, Enum):
    SELF = "self"
    RATER1 = "rater1"
    RATER2 = "rater2"

class ProfileTable(str, Enum):
    ACHIEVER = "achiever"    # Ten named archetypes, balanced fallback
    ARCHETYPE = "archetype"  # Trait-composite labels, "Profile Not Found" fallback
