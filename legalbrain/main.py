"""
FastAPI service for the LegalBrain portal's chatbot and FIR-drafting screens.

Features:
- POST /api/chatbot answers a legal question from a fixed knowledge base.
- POST /api/ai/ipc-suggestions suggests IPC sections for an incident description.
- POST /api/fir/draft builds the FIR text with the top suggested sections.
- GET endpoints for suggested starter questions and emergency contacts.

Authentication, storage of chats/FIRs and PDF rendering are handled by the
portal; this service only computes answers.

Run the server:
    uvicorn legalbrain.main:app --reload
"""
from datetime import datetime
from typing import Optional, Sequence
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from legalbrain import fir as fir_mod
from legalbrain import ipc as ipc_mod
from legalbrain.classifier import ResponseClassifier
from legalbrain.config import Settings, get_settings
from legalbrain.knowledge import (
    EMERGENCY_CONTACTS,
    KNOWLEDGE_BASE,
    SUGGESTED_QUESTIONS,
    KnowledgeEntry,
    validate_knowledge_base,
)
from legalbrain.schemas import (
    ChatbotRequest,
    ChatbotResponse,
    EmergencyContactModel,
    EmergencyContactsResponse,
    FIRDraft,
    FIRDraftResponse,
    IPCSuggestionModel,
    IPCSuggestionRequest,
    IPCSuggestionResponse,
    SuggestedQuestionsResponse,
)

logger = logging.getLogger(__name__)


def _suggestion_models(suggestions: Sequence[ipc_mod.IPCSuggestion]):
    return [
        IPCSuggestionModel(section=s.section, title=s.title, description=s.description, confidence=s.confidence)
        for s in suggestions
    ]


def create_app(settings: Optional[Settings] = None, knowledge_base: Optional[Sequence[KnowledgeEntry]] = None) -> FastAPI:
    """Build the API around a validated knowledge base.

    Raises KnowledgeBaseError if the knowledge base is empty or malformed, so a
    misconfigured service fails at startup instead of answering with fallbacks.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    entries = validate_knowledge_base(KNOWLEDGE_BASE if knowledge_base is None else knowledge_base)

    app = FastAPI(title="LegalBrain legal information service")
    app.state.settings = settings
    app.state.classifier = ResponseClassifier(entries)
    logger.info("Knowledge base loaded with %d entries", len(entries))

    # Allow cross-origin requests from the portal frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/chatbot", response_model=ChatbotResponse)
    async def chatbot(req: ChatbotRequest, request: Request):
        """
        Answer a legal question.

        Example request body:
            { "query": "What is section 498A?", "language": "hindi" }

        An empty or unrelated query still gets a general answer with confidence 0.5.
        """
        classifier: ResponseClassifier = request.app.state.classifier
        language = req.language or settings.default_language
        try:
            result = classifier.classify(req.query, language)
        except Exception:
            logger.exception("Failed to classify chatbot query")
            raise HTTPException(status_code=500, detail="Failed to process chat request")

        if settings.log_queries:
            logger.info("Chat query=%r language=%s confidence=%.3f", req.query, language, result.confidence)
        else:
            logger.info("Chat query answered: language=%s confidence=%.3f", language, result.confidence)

        return ChatbotResponse(
            response=result.response,
            confidence=result.confidence,
            suggested_actions=list(result.suggested_actions),
            related_sections=list(result.related_sections),
        )

    @app.post("/api/ai/ipc-suggestions", response_model=IPCSuggestionResponse)
    async def ipc_suggestions(req: IPCSuggestionRequest):
        """Suggest IPC sections for an incident, highest confidence first."""
        try:
            suggestions = ipc_mod.suggest_sections(req.description, req.crime_type)
        except Exception:
            logger.exception("Failed to generate IPC suggestions")
            raise HTTPException(status_code=500, detail="Failed to generate IPC suggestions")
        logger.info("IPC suggestions for crime type %r: %s", req.crime_type, [s.section for s in suggestions])
        return IPCSuggestionResponse(suggestions=_suggestion_models(suggestions))

    @app.post("/api/fir/draft", response_model=FIRDraftResponse)
    async def draft_fir(draft: FIRDraft):
        """Build the FIR text, filling in the top three suggested IPC sections."""
        try:
            suggestions = ipc_mod.suggest_sections(draft.description, draft.crime_type)
            sections = ipc_mod.top_sections(suggestions)
            document = fir_mod.render_fir_document(draft, sections, datetime.now())
        except Exception:
            logger.exception("Failed to draft FIR")
            raise HTTPException(status_code=500, detail="Failed to generate FIR")
        logger.info("Drafted FIR %s with sections %s", draft.fir_number, sections)
        return FIRDraftResponse(ipc_sections=sections, suggestions=_suggestion_models(suggestions), document=document)

    @app.get("/api/chatbot/suggested-questions", response_model=SuggestedQuestionsResponse)
    async def suggested_questions():
        return SuggestedQuestionsResponse(questions=list(SUGGESTED_QUESTIONS))

    @app.get("/api/emergency-contacts", response_model=EmergencyContactsResponse)
    async def emergency_contacts():
        return EmergencyContactsResponse(
            contacts=[EmergencyContactModel(name=c.name, number=c.number, description=c.description) for c in EMERGENCY_CONTACTS]
        )

    # Basic root endpoint to confirm server is up
    @app.get("/")
    async def root():
        return {"status": "ok"}

    @app.get("/health")
    async def health(request: Request):
        return {
            "status": "ok",
            "knowledge_entries": len(request.app.state.classifier.knowledge_base),
            "default_language": settings.default_language,
        }

    return app


app = create_app()


if __name__ == "__main__":
    # Using uvicorn directly is recommended:
    # uvicorn legalbrain.main:app --reload
    import uvicorn

    _settings = get_settings()
    uvicorn.run(app, host=_settings.host, port=_settings.port)
