"""
Gemini-backed match analysis for FootyAI.

- `markets` holds the mandatory market taxonomy per sport.
- `prompt_builder` turns a match request into the analysis prompt.
- `analyzer` sends the search-grounded request and parses the response.
- `sources` extracts and deduplicates grounding citations.
- `errors` defines analyzer errors and credential-error detection.
"""
