from pydantic import BaseModel

from app.models.enums import MemberRole


class Team(BaseModel):
    id: str
    name: str
    coverage: str


class Member(BaseModel):
    id: str
    name: str
    role: MemberRole
    team_id: str | None = None
