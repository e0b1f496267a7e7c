"""
Pydantic request/response bodies for the HTTP API.

Fields are snake_case in Python and camelCase on the wire, matching the
portal frontend.
"""
from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatbotRequest(ApiModel):
    query: str = ""
    language: Optional[str] = None


class ChatbotResponse(ApiModel):
    response: str
    confidence: float
    suggested_actions: List[str] = []
    related_sections: List[str] = []


class IPCSuggestionRequest(ApiModel):
    description: str
    crime_type: str


class IPCSuggestionModel(ApiModel):
    section: str
    title: str
    description: str
    confidence: float


class IPCSuggestionResponse(ApiModel):
    suggestions: List[IPCSuggestionModel]


FIRStatus = Literal["pending", "investigating", "chargesheet_filed", "court_proceedings", "disposed"]


class FIRDraft(ApiModel):
    crime_type: str
    description: str
    location: str
    incident_date: date
    incident_time: str
    police_station: Optional[str] = None
    investigating_officer: Optional[str] = None
    fir_number: str = "Pending"
    status: FIRStatus = "pending"


class FIRDraftResponse(ApiModel):
    ipc_sections: List[str]
    suggestions: List[IPCSuggestionModel]
    document: str


class SuggestedQuestionsResponse(ApiModel):
    questions: List[str]


class EmergencyContactModel(ApiModel):
    name: str
    number: str
    description: str


class EmergencyContactsResponse(ApiModel):
    contacts: List[EmergencyContactModel]
