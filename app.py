# DEPENDENCIES
import sys
import time
import uuid
import signal
import uvicorn
from typing import Any
from typing import Dict
from typing import List
from pydantic import Field
from fastapi import FastAPI
from fastapi import Request
from typing import Optional
from datetime import datetime
from pydantic import BaseModel
from fastapi import HTTPException
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from utils.logger import log_info
from utils.logger import log_error
from config.settings import settings
from utils.text_processor import TextProcessor
from utils.logger import log_warning
from config.legal_rules import DEFAULT_RULE_SET
from utils.validators import AnalysisInputValidator
from services.legal_issue_detector import LegalIssueDetector


# PYDANTIC SCHEMAS
class AnalyzeRequest(BaseModel):
    filename   : str           = Field(default = "document.txt")
    mime_type  : str           = Field(default = "text/plain", alias = "mimeType")
    content    : str           = Field(default = "")
    page_count : int           = Field(default = 1, ge = 0, alias = "pageCount")
    word_count : Optional[int] = Field(default = None, ge = 0, alias = "wordCount")


    class Config:
        populate_by_name = True


class AnalyzeResponse(BaseModel):
    success              : bool
    analysisId           : str
    filename             : str
    riskScore            : float
    riskBand             : str
    complianceScore      : float
    totalIssues          : int
    issues               : List[Dict[str, Any]]
    severityDistribution : Dict[str, int]
    categoryDistribution : Dict[str, int]
    wordCount            : int
    pageCount            : int
    processingTime       : int   # milliseconds


class HealthResponse(BaseModel):
    status    : str
    version   : str
    timestamp : str
    rules     : int


# FASTAPI APPLICATION : shared, stateless instances
detector  = LegalIssueDetector(rule_set = DEFAULT_RULE_SET)
validator = AnalysisInputValidator()


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_info(f"{settings.APP_NAME} v{settings.APP_VERSION} starting up",
             host  = settings.HOST,
             port  = settings.PORT,
             rules = len(detector.rule_set),
            )

    try:
        yield

    finally:
        log_info("Server shutdown complete")


app = FastAPI(title       = settings.APP_NAME,
              version     = settings.APP_VERSION,
              description = "Rule-based legal compliance risk analysis (Indian Contract Act 1872)",
              docs_url    = "/api/docs",
              redoc_url   = "/api/redoc",
              lifespan    = lifespan,
             )

app.add_middleware(CORSMiddleware,
                   allow_origins     = settings.CORS_ORIGINS,
                   allow_credentials = settings.CORS_ALLOW_CREDENTIALS,
                   allow_methods     = settings.CORS_ALLOW_METHODS,
                   allow_headers     = settings.CORS_ALLOW_HEADERS,
                  )


# API ROUTES
@app.get(f"{settings.API_PREFIX}/health", response_model = HealthResponse)
async def health_check():
    return HealthResponse(status    = "healthy",
                          version   = settings.APP_VERSION,
                          timestamp = datetime.now().isoformat(),
                          rules     = len(detector.rule_set),
                         )


@app.get(f"{settings.API_PREFIX}/rules")
async def list_rules():
    return {"rules"      : [rule.to_dict() for rule in detector.rule_set],
            "categories" : detector.rule_set.categories(),
           }


@app.post(f"{settings.API_PREFIX}/analyze", response_model = AnalyzeResponse)
def analyze_contract(request: AnalyzeRequest):
    start_time                           = time.perf_counter()

    is_valid, validation_type, message   = validator.validate(content    = request.content,
                                                              word_count = request.word_count,
                                                             )

    if not is_valid:
        log_warning("Analysis request rejected",
                    filename        = request.filename,
                    validation_type = validation_type,
                   )

        raise HTTPException(status_code = 400,
                            detail      = message,
                           )

    result                               = detector.analyze(request.content)
    processing_time                      = int((time.perf_counter() - start_time) * 1000)
    word_count                           = request.word_count if request.word_count is not None else TextProcessor.count_words(request.content)

    response                             = AnalyzeResponse(success              = True,
                                                           analysisId           = str(uuid.uuid4()),
                                                           filename             = request.filename,
                                                           riskScore            = result.risk_score,
                                                           riskBand             = result.risk_band,
                                                           complianceScore      = result.compliance_score,
                                                           totalIssues          = result.total_issues,
                                                           issues               = [issue.to_dict() for issue in result.issues],
                                                           severityDistribution = result.severity_distribution(),
                                                           categoryDistribution = result.category_distribution(),
                                                           wordCount            = word_count,
                                                           pageCount            = request.page_count,
                                                           processingTime       = processing_time,
                                                          )

    log_info("Document analysis completed",
             filename     = request.filename,
             analysis_id  = response.analysisId,
             risk_score   = result.risk_score,
             total_issues = result.total_issues,
            )

    return response


# ERROR HANDLERS AND MIDDLEWARE
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code = exc.status_code,
                        content     = {"success"   : False,
                                       "error"     : exc.detail,
                                       "timestamp" : datetime.now().isoformat(),
                                      },
                       )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    log_error(exc, context = {"path" : request.url.path})

    return JSONResponse(status_code = 500,
                        content     = {"success"   : False,
                                       "error"     : "Analysis failed",
                                       "timestamp" : datetime.now().isoformat(),
                                      },
                       )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time   = time.perf_counter()
    response     = await call_next(request)
    process_time = time.perf_counter() - start_time

    log_info(f"API Request: {request.method} {request.url.path} - Status: {response.status_code} - Duration: {process_time:.3f}s")

    return response



# MAIN
def main():
    def signal_handler(sig, frame):
        print("\nReceived Ctrl+C, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    try:
        uvicorn.run("app:app",
                    host      = settings.HOST,
                    port      = settings.PORT,
                    reload    = settings.RELOAD,
                    workers   = settings.WORKERS,
                    log_level = settings.LOG_LEVEL.lower(),
                   )

    except Exception as e:
        log_error(e, context = {"operation" : "server"})
        sys.exit(1)


if __name__ == "__main__":
    main()
