"""UI Routes - Renders the read-only league dashboard."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_hub.models.fields import GameStatus, Platform
from franchise_hub.services import league_service, standings_service, team_service
from franchise_hub.utils.db_async import get_session

router = APIRouter()

SEASON_LABELS = {0: "Preseason", 1: "Regular Season", 2: "Postseason"}


def _platform_label(value: str) -> str:
    try:
        return Platform(value).label
    except ValueError:
        return value


@router.get("/leagues/{slug}", response_class=HTMLResponse)
async def league_dashboard(
    request: Request, slug: str, db: AsyncSession = Depends(get_session)
):
    """League overview: summary cards, teams by division and latest standings."""
    league = await league_service.get_league_by_slug(db, slug)
    if league is None:
        raise HTTPException(status_code=404, detail="League not found")

    summary = await league_service.get_league_summary(db, league.id)
    teams = await team_service.list_teams(db, league.id)
    standings = await standings_service.list_standings(db, league.id)

    divisions: dict[str, list] = {}
    for team in teams:
        divisions.setdefault(team.div_name or "Unassigned", []).append(team)

    return request.app.state.templates.TemplateResponse(
        request,
        "league_dashboard.html",
        {
            "league": league,
            "platform_label": _platform_label(league.platform),
            "summary": summary,
            "season_label": SEASON_LABELS.get(summary.latest_season, "Season"),
            "divisions": divisions,
            "standings": standings,
            "final_status": GameStatus.FINAL.value,
            "current_year": datetime.now().year,
        },
    )
