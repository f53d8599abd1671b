from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_settings
from config import Settings, settings
from models.requests import CompatibilityRequest, DiscoverRequest, RankRequest
from models.responses import DiscoverResponse, RankResponse
from models.schemas.compatibility import CompatibilityResult
from services.adapters import parse_candidate, parse_vacancy, parse_weights
from services.pipeline.discovery import discover_vacancies
from services.pipeline.orchestrator import rank_candidates, ranked_ids, score_compatibility
from services.pipeline.verdict import build_verdict

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "minimum_match_score": settings.minimum_match_score,
    }


@router.post("/rank", response_model=RankResponse)
@limiter.limit(settings.rate_limit)
async def rank(
    request: Request,
    body: RankRequest,
    config: Settings = Depends(get_settings),
):
    if len(body.candidates) > config.max_pool_size:
        raise HTTPException(
            status_code=400,
            detail=f"Too many candidates. Max pool size: {config.max_pool_size}",
        )

    vacancy = parse_vacancy(body.vacancy)
    weights = parse_weights(body.weights) if body.weights is not None else vacancy.weights
    if body.normalize_weights:
        weights = weights.normalized()

    candidates = [parse_candidate(c) for c in body.candidates]
    ranked = rank_candidates(vacancy, weights, candidates, max_workers=config.matrix_workers)

    return RankResponse(
        vacancy_id=vacancy.id,
        ranked=ranked,
        ranked_ids=ranked_ids(ranked),
        verdicts=[build_verdict(c, len(ranked)) for c in ranked],
    )


@router.post("/compatibility", response_model=CompatibilityResult)
@limiter.limit(settings.rate_limit)
async def compatibility(
    request: Request,
    body: CompatibilityRequest,
    config: Settings = Depends(get_settings),
):
    return score_compatibility(
        parse_vacancy(body.vacancy),
        parse_candidate(body.candidate),
        body.distance_km,
        remote_job_type=config.remote_job_type,
    )


@router.post("/discover", response_model=DiscoverResponse)
@limiter.limit(settings.rate_limit)
async def discover(
    request: Request,
    body: DiscoverRequest,
    config: Settings = Depends(get_settings),
):
    if len(body.vacancies) > config.max_pool_size:
        raise HTTPException(
            status_code=400,
            detail=f"Too many vacancies. Max pool size: {config.max_pool_size}",
        )

    seeker = parse_candidate(body.seeker)
    vacancies = [parse_vacancy(v) for v in body.vacancies]
    matches = discover_vacancies(
        seeker,
        vacancies,
        excluding_ids=body.excluding_ids,
        minimum_score=config.minimum_match_score,
        tie_window=config.score_tie_window,
        remote_job_type=config.remote_job_type,
    )
    return DiscoverResponse(seeker_id=seeker.id, matches=matches)
