from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.errors import NotFoundError
from ..database import get_db
from ..dependencies import get_current_user
from ..models.athlete import Athlete
from ..models.user import Team, User
from ..schemas.user import TeamDetail, TeamRead, UserSummary

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=list[TeamRead])
def list_teams(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[Team]:
    return db.query(Team).order_by(Team.name).all()


@router.get("/my-team", response_model=TeamDetail)
def my_team(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TeamDetail:
    team = db.get(Team, current_user.team_id)
    if not team:
        raise NotFoundError("Team not found.")
    members = db.query(User).filter(User.team_id == team.id).order_by(User.name).all()
    athlete_count = db.query(Athlete).filter(Athlete.team_id == team.id).count()
    return TeamDetail(
        id=team.id,
        name=team.name,
        members=[UserSummary.model_validate(member) for member in members],
        athlete_count=athlete_count,
    )
