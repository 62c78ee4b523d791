"""Instruction prompt for resume extraction."""

from __future__ import annotations

from resume_parser.lib.models.models import PromptRequest

# Changing this wording changes the shape of the model output.
BASE_PROMPT = """You are a resume parsing API that extracts information from resumes and converts it to structured JSON.

Your task is to analyze the resume text provided and return a JSON object with the following structure:

{
  "contactInfo": {
    "name": {
      "firstName": "",
      "lastName": ""
    },
    "email": "",
    "phone": "",
    "address": {
      "street": "",
      "city": "",
      "state": "",
      "zipCode": "",
      "country": ""
    },
    "linkedIn": "",
    "website": ""
  },
  "workExperience": [
    {
      "company": "",
      "title": "",
      "location": "",
      "startDate": "",
      "endDate": "",
      "description": "",
      "reasonForLeaving": ""
    }
  ],
  "education": [
    {
      "institution": "",
      "degree": "",
      "field": "",
      "location": "",
      "graduationDate": ""
    }
  ],
  "skills": [],
  "certifications": [],
  "summary": ""
}

Guidelines:
1. Maintain 100% fidelity to the original text in the resume, just semantically group it
2. Contact information MUST be captured in separate fields
3. For work experience and education, preserve the exact text but organize it into the proper structure
4. If a field is not present in the resume, include the field with an empty string
5. Return only valid JSON (no explanations before or after)
6. For ongoing positions, use "Present" for endDate
7. Preserve the chronological order of experiences and education as they appear in the resume"""

RESUME_DATA_HEADER = "\nHere is the resume data:\n"


def build_prompt(extracted_text: str) -> PromptRequest:
    """Pair the fixed instructions with the extracted resume text."""
    return PromptRequest(instructions=BASE_PROMPT, input=extracted_text)


def inline_prompt(prompt: PromptRequest) -> str:
    """Render instructions and resume text as a single user message."""
    return prompt.instructions + RESUME_DATA_HEADER + prompt.input
