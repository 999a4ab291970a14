"""Grade report from an uploaded "id, name, score" text file."""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from grading import GradingFormatError, format_report, parse_students

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/grading", tags=["grading"])


@router.post("/report")
async def grade_report(file: UploadFile = File(...)):
    content = await file.read()
    if len(content) > 1024 * 1024:
        raise HTTPException(413, "File too large. Maximum 1 MB.")
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(400, "Student file must be UTF-8 text") from e

    try:
        students = parse_students(text.splitlines())
    except GradingFormatError as e:
        logger.info("Rejected %s: %s", file.filename, e)
        raise HTTPException(400, str(e)) from e

    lines = format_report(students)
    return JSONResponse({
        "students": [
            {**s.model_dump(), "grade": s.grade} for s in students
        ],
        "report": "\n".join(lines),
    })
