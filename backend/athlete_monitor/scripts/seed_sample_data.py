from __future__ import annotations

from sqlalchemy.orm import Session

from athlete_monitor.core.enums import AthleteStatus, Position, UserRole
from athlete_monitor.core.security import get_password_hash
from athlete_monitor.database import session_scope
from athlete_monitor.models.athlete import Athlete
from athlete_monitor.models.exercise import Exercise
from athlete_monitor.models.recommendation import CriteriaWeight, RecommendationRule
from athlete_monitor.models.user import Team, User

DEFAULT_PASSWORD = "password123"

ATHLETES = [
    ("Rafi Ahmad", Position.STRIKER, AthleteStatus.PRIMA),
    ("Dimas Setiawan", Position.MIDFIELDER, AthleteStatus.FIT),
    ("Yoga Pratama", Position.DEFENDER, AthleteStatus.PEMULIHAN),
    ("Eko Saputra", Position.GOALKEEPER, AthleteStatus.FIT),
]

EXERCISES = [
    ("Sprint 100m", "Cardio", "Kecepatan", "Latihan sprint jarak pendek"),
    ("Squat", "Strength", "Kekuatan Kaki", "Latihan kekuatan otot kaki"),
    ("Plank", "Core", "Keseimbangan", "Latihan stabilitas core"),
    ("Yoga Stretch", "Flexibility", "Fleksibilitas", "Latihan peregangan"),
]

CRITERIA = [
    ("Kecepatan", 0.25),
    ("Kekuatan", 0.2),
    ("Daya Tahan", 0.2),
    ("Fleksibilitas", 0.15),
    ("Keseimbangan", 0.1),
    ("Kelincahan", 0.1),
]

RULES = [
    (
        1,
        '{"Cedera": ">=7"}',
        "Atlet mengalami cedera berat. Segera rujuk ke fisioterapis dan hentikan latihan intensif.",
    ),
    (
        2,
        '{"Pemulihan": "<5"}',
        "Proses pemulihan masih rendah. Fokus pada terapi ringan dan pemantauan harian.",
    ),
    (
        3,
        '{"Fleksibilitas": "<4", "Kekuatan": "<5"}',
        "Kekuatan dan fleksibilitas di bawah standar. Tambahkan latihan penguatan dan peregangan 3x/minggu.",
    ),
    (
        4,
        '{"Stress": ">=8"}',
        "Tingkat stres sangat tinggi. Lakukan sesi konseling psikologis dan kurangi beban latihan.",
    ),
    (
        5,
        '{"Rata-rata Jam Tidur": "<6"}',
        "Kurang tidur kronis. Edukasi atlet tentang pentingnya istirahat dan pantau pola tidur.",
    ),
]


def ensure_team(db: Session, name: str) -> Team:
    team = db.query(Team).filter_by(name=name).first()
    if team:
        return team
    team = Team(name=name)
    db.add(team)
    db.flush()
    return team


def ensure_user(
    db: Session,
    *,
    team: Team,
    name: str,
    email: str,
    role: UserRole,
    password: str,
) -> User:
    user = db.query(User).filter_by(email=email).first()
    if user:
        return user
    user = User(
        name=name,
        email=email,
        role=role,
        team_id=team.id,
        password_hash=get_password_hash(password),
    )
    db.add(user)
    db.flush()
    return user


def ensure_athletes(db: Session, team: Team) -> None:
    if db.query(Athlete).filter_by(team_id=team.id).count():
        return
    for name, position, status in ATHLETES:
        db.add(Athlete(team_id=team.id, name=name, position=position, status=status))


def ensure_catalog(db: Session) -> None:
    if not db.query(Exercise).count():
        for name, exercise_type, focus_area, description in EXERCISES:
            db.add(
                Exercise(name=name, type=exercise_type, focus_area=focus_area, description=description)
            )
    if not db.query(CriteriaWeight).count():
        for position in Position:
            for criteria_name, weight in CRITERIA:
                db.add(CriteriaWeight(position=position, criteria_name=criteria_name, weight=weight))
    if not db.query(RecommendationRule).count():
        for priority, condition, text in RULES:
            db.add(
                RecommendationRule(
                    priority=priority, trigger_condition=condition, recommendation_text=text
                )
            )


def main() -> None:
    with session_scope() as db:
        team = ensure_team(db, "Tim Utama")
        ensure_user(
            db,
            team=team,
            name="Dr. Budi",
            email="medis@test.com",
            role=UserRole.MEDICAL,
            password=DEFAULT_PASSWORD,
        )
        ensure_user(
            db,
            team=team,
            name="Coach Andi",
            email="pelatih@test.com",
            role=UserRole.COACH,
            password=DEFAULT_PASSWORD,
        )
        ensure_athletes(db, team)
        ensure_catalog(db)
    print(f"Seed data ready. Users: medis@test.com / pelatih@test.com (pass: {DEFAULT_PASSWORD})")


if __name__ == "__main__":
    main()
