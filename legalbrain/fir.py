"""
Plain-text FIR (First Information Report) documents.

Builds the text block that accompanies a drafted FIR. Numbering follows the
portal's `FIR/<year>/<sequence>` scheme: `format_fir_number` is called by the
portal's FIR storage, which owns the sequence counter. Drafts rendered here
show "Pending" until that number is assigned. PDF output lives elsewhere.
"""
from datetime import datetime
from typing import Sequence

from legalbrain.schemas import FIRDraft


def format_fir_number(year: int, sequence: int) -> str:
    if sequence < 1:
        raise ValueError("FIR sequence numbers start at 1")
    return f"FIR/{year}/{sequence:06d}"


def render_fir_document(draft: FIRDraft, ipc_sections: Sequence[str], generated_at: datetime) -> str:
    sections = ", ".join(ipc_sections) if ipc_sections else "To be determined"
    lines = [
        "FIRST INFORMATION REPORT (FIR)",
        "===============================",
        "",
        f"FIR Number: {draft.fir_number}",
        f"Date: {generated_at.strftime('%d/%m/%Y')}",
        f"Police Station: {draft.police_station or 'TBD'}",
        "",
        "INCIDENT DETAILS:",
        f"Crime Type: {draft.crime_type}",
        f"Date of Incident: {draft.incident_date.strftime('%d/%m/%Y')}",
        f"Time of Incident: {draft.incident_time}",
        f"Location: {draft.location}",
        "",
        "DESCRIPTION:",
        draft.description,
        "",
        "IPC SECTIONS:",
        sections,
        "",
        f"STATUS: {draft.status}",
        f"INVESTIGATING OFFICER: {draft.investigating_officer or 'To be assigned'}",
        "",
        "This is a computer-generated document.",
        f"Generated on: {generated_at.strftime('%d/%m/%Y %H:%M:%S')}",
    ]
    return "\n".join(lines) + "\n"
