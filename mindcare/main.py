import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Routers
from mindcare.routers import analytics, assessment, chat
from mindcare.utils.scoring import AssessmentError

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="MindCare API", version="1.0.0")

# CORS for the student/counsellor web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AssessmentError)
def assessment_error_handler(request: Request, exc: AssessmentError):
    logger.info("Rejected assessment on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Register routers
app.include_router(assessment.router, prefix="/assessments", tags=["Assessments"])
app.include_router(chat.router, prefix="/chat", tags=["AI Counselor"])
app.include_router(analytics.router, prefix="/analytics", tags=["Dashboard Analytics"])


@app.get("/")
def root():
    return {"message": "MindCare backend running successfully!"}
