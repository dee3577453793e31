"""
LabInsight - FastAPI Application

API endpoints for:
- Cross-marker lab pattern detection
- Domain risk scoring (cardiovascular, diabetes, kidney)
- Longitudinal trend analysis
- Health checks and the pattern catalogue
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from typing import List
from datetime import datetime
import uuid

from labinsight.config import settings
from labinsight.utils import (
    get_logger,
    setup_logging,
    LabInsightError,
    LabInputError,
)
from labinsight.core.patterns import (
    LabPatternEngine,
    LabValue,
    PatternType,
    Severity,
    RISK_DOMAINS,
)
from labinsight.models import (
    LabAnalysisRequest,
    LabAnalysisResponse,
    PatternsResponse,
    RiskScoresResponse,
    TrendRequest,
    TrendResponse,
    HealthResponse,
)

setup_logging(level=settings.log_level, log_file=settings.log_file)
logger = get_logger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title=settings.app_name,
    description="Deterministic lab-pattern detection and risk scoring over structured lab values",
    version=settings.version,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_engine = LabPatternEngine()
START_TIME = datetime.now()


@app.exception_handler(LabInsightError)
async def labinsight_error_handler(request: Request, exc: LabInsightError):
    logger.warning(f"{request.url.path}: {exc.code} - {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


# ---- Utility Functions ----

def _checked_batch(request: LabAnalysisRequest) -> List[LabValue]:
    """Convert the request body to a batch, enforcing the size limit."""
    if len(request.lab_values) > settings.max_batch_size:
        raise LabInputError(
            f"Batch of {len(request.lab_values)} lab values exceeds the limit of "
            f"{settings.max_batch_size}",
            details={"max_batch_size": settings.max_batch_size},
        )
    return request.batch()


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=settings.version,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.get("/api/v1/patterns", tags=["Reference"])
async def list_patterns():
    """Catalogue of pattern types, severities, detectors and risk domains."""
    return {
        "pattern_types": [p.value for p in PatternType],
        "severities": [s.value for s in Severity],
        "detectors": LabPatternEngine.registered_detectors(),
        "risk_domains": list(RISK_DOMAINS),
    }


@app.post("/api/v1/labs/analyze", response_model=LabAnalysisResponse, tags=["Analysis"])
async def analyze_labs(request: LabAnalysisRequest):
    """
    Detect patterns and score domain risks for one batch of lab values.
    """
    batch = _checked_batch(request)
    result = _engine.analyze(batch)
    patterns = result["patterns"]

    analysis_id = f"LAB-{uuid.uuid4().hex[:12].upper()}"
    logger.info(
        f"Analysis {analysis_id} for patient {request.patient_id}: "
        f"{len(batch)} value(s), {len(patterns)} pattern(s)"
    )

    return LabAnalysisResponse(
        analysis_id=analysis_id,
        patient_id=request.patient_id,
        timestamp=datetime.now().isoformat(),
        patterns=[p.to_dict() for p in patterns],
        riskScores=result["riskScores"],
        summary=LabPatternEngine.summarise(patterns),
    )


@app.post("/api/v1/labs/patterns", response_model=PatternsResponse, tags=["Analysis"])
async def detect_patterns(request: LabAnalysisRequest):
    """Pattern detection only."""
    batch = _checked_batch(request)
    return PatternsResponse(patterns=[p.to_dict() for p in _engine.detect(batch)])


@app.post("/api/v1/labs/risk-scores", response_model=RiskScoresResponse, tags=["Analysis"])
async def risk_scores(request: LabAnalysisRequest):
    """Domain risk scores only."""
    batch = _checked_batch(request)
    return RiskScoresResponse(riskScores=_engine.score(batch))


@app.post("/api/v1/labs/trends", response_model=TrendResponse, tags=["Analysis"])
async def lab_trends(request: TrendRequest):
    """
    Trend analysis across dated snapshots.

    A snapshot with a non ISO-8601 date is rejected with HTTP 422.
    """
    history = [snapshot.to_snapshot() for snapshot in request.history]
    trends = _engine.trends(history)
    return TrendResponse(trends=[t.to_dict() for t in trends])


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
