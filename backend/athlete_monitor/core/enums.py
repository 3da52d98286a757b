import enum


class UserRole(str, enum.Enum):
    MEDICAL = "medis"
    COACH = "pelatih"


class Position(str, enum.Enum):
    STRIKER = "Striker"
    MIDFIELDER = "Midfielder"
    DEFENDER = "Defender"
    GOALKEEPER = "Goalkeeper"


class AthleteStatus(str, enum.Enum):
    PRIMA = "Prima"
    FIT = "Fit"
    PEMULIHAN = "Pemulihan"
    REHABILITASI = "Rehabilitasi"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values rather than member names."""
    return [member.value for member in enum_cls]
