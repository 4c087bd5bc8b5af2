#!/usr/bin/env python3
"""
Newline Converter FastAPI App
An HTTP wrapper exposing the literal-newline conversion for uploaded text files.
"""

import logging
import os

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import uvicorn

from . import __version__
from .converters import count_literal_newlines, derive_output_path, split_lines
from .services.file_conversion import _default_settings, convert_text

app = FastAPI(
    title="Newline Converter API",
    description="Replace literal \\n sequences with newlines",
    version=__version__
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Enable CORS for cross-origin usage (e.g., accessing API from other devices)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ConversionResponse(BaseModel):
    success: bool
    filename: str
    output_filename: str
    content: str
    lines: int
    substitutions: int


def upload_encoding() -> str:
    """Encoding used to decode uploads; the converter setting or UTF-8."""
    return _default_settings().encoding or "utf-8"


def output_filename_for(filename: str) -> str:
    try:
        return derive_output_path(filename).name
    except ValueError:
        return "converted - copy.txt"


@app.get("/info")
async def get_info():
    """Get version and encoding information."""
    return {
        "version": __version__,
        "encoding": upload_encoding(),
    }


@app.post("/convert", response_model=ConversionResponse)
async def convert_document(file: UploadFile = File(...)):
    """
    Convert an uploaded text file.

    Args:
        file: Text file whose literal \\n sequences should become newlines

    Returns:
        JSON response with the converted content
    """
    original_filename = file.filename or "uploaded.txt"
    encoding = upload_encoding()

    try:
        raw = await file.read()
    except Exception as exc:
        raise HTTPException(status_code=500, detail="Failed to read uploaded file") from exc

    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise HTTPException(
            status_code=400,
            detail=f"Uploaded file is not valid {encoding} text: {exc}"
        ) from exc

    lines = split_lines(text)

    logger.info("Converted %s (%d lines)", original_filename, len(lines))

    return ConversionResponse(
        success=True,
        filename=original_filename,
        output_filename=output_filename_for(original_filename),
        content=convert_text(text),
        lines=len(lines),
        substitutions=sum(count_literal_newlines(line) for line in lines),
    )


def main() -> None:
    host = os.environ.get("HOST", "0.0.0.0")
    try:
        port = int(os.environ.get("PORT", "8000"))
    except ValueError:
        port = 8000

    print("="*60)
    print("Newline Converter FastAPI Server")
    print("="*60)
    print(f"Starting server on http://{host}:{port}")
    print("="*60 + "\n")

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
