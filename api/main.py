import os
import logging
import logging.config

import yaml
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from api.schemas import (
    AnnotateRequest,
    AnnotateResponse,
    CompleteRequest,
    CompleteResponse,
    MentionSchema,
    MentionsRequest,
    MentionsResponse,
    RunSchema,
)
from annotator.completion import filter_names, find_mention_query
from annotator.config import AnnotatorConfig, load_config
from annotator.models import Link
from annotator.pipeline import annotate_spans
from annotator.tokenize import tokenize


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"[logging] Failed to load logging.yaml: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


setup_logging()
logger = logging.getLogger("api")

CONFIG_PATH = os.environ.get("ANNOTATOR_CONFIG", os.path.join("configs", "annotator.yaml"))


def get_config() -> AnnotatorConfig:
    if not os.path.exists(CONFIG_PATH):
        return AnnotatorConfig()
    return load_config(CONFIG_PATH)


app = FastAPI(
    title="Chat Annotator",
    version="0.1.0",
    description="Splits chat messages into text, mention and link runs.",
)

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/annotate", response_model=AnnotateResponse)
def annotate_message(req: AnnotateRequest) -> AnnotateResponse:
    logger.info("Received /annotate request (%d chars)", len(req.text))
    annotated = annotate_spans(req.text, req.current_user_name, get_config())
    runs = [
        RunSchema(
            kind=a.run.kind,
            content=a.run.content,
            href=a.run.href if isinstance(a.run, Link) else None,
            start=a.span.start,
            end=a.span.end,
        )
        for a in annotated
    ]
    return AnnotateResponse(runs=runs)


@app.post("/mentions", response_model=MentionsResponse)
def list_mentions(req: MentionsRequest) -> MentionsResponse:
    logger.info("Received /mentions request")
    mentions = [
        MentionSchema(
            start=c.span.start,
            end=c.span.end,
            raw_match=c.raw_match,
            user_name=c.user_name,
        )
        for c in tokenize(req.text, get_config())
    ]
    return MentionsResponse(mentions=mentions)


@app.post("/mentions/complete", response_model=CompleteResponse)
def complete_mention(req: CompleteRequest) -> CompleteResponse:
    logger.info("Received /mentions/complete request")
    if req.cursor > len(req.text):
        raise HTTPException(status_code=422, detail="cursor is past the end of text")

    query = find_mention_query(req.text, req.cursor)
    if query is None:
        return CompleteResponse(active=False)

    return CompleteResponse(
        active=True,
        at_index=query.at_index,
        query=query.query,
        suggestions=filter_names(req.names, query.query, req.limit),
    )
