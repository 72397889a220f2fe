RESPONSE_FORMAT = """{
  "score": number (0-100),
  "missing_keywords": string[] (specific keywords present in the job description but absent from the resume),
  "tailored_suggestions": string[] (exactly 5 specific "Impact Lines" written with the STAR method, naming industry tools where applicable, e.g. "Leveraged [Tool] to ...")
}"""

PROMPT = """
Act as a Senior Technical Recruiter. Compare this Resume to this Job Description (JD).

Instructions:
- Score how well the resume matches the JD from 0 to 100.
- List the keywords and competencies the JD asks for that the resume does not mention.
- Write exactly five tailored resume lines using the STAR method that reuse the candidate's existing experience.
- Return only a JSON object in the format below. Do not add keys. Do not return markdown.

Response Format (JSON only):
{0}

RESUME:
\"\"\"
{1}
\"\"\"

JOB DESCRIPTION:
\"\"\"
{2}
\"\"\"
"""
