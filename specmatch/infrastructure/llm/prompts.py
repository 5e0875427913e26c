"""LLM prompt templates for spec verification.

Embedded content is inserted verbatim. A spec or file that itself contains a
triple-backtick fence makes the rendered prompt ambiguous; this is not guarded
against.
"""

from collections.abc import Mapping

FILE_SECTION_TEMPLATE = "\n### {path}\n```\n{content}\n```\n"


VERIFICATION_PROMPT = """You are an expert code reviewer. Compare the SPEC (specification) below with the actual code and evaluate how closely they match.

## SPEC (specification)
{spec_content}

## Actual code
{code_section}

## Evaluation criteria
Evaluate from the following perspectives:
1. Screen composition: the elements described in the SPEC exist in the code
2. State management: the state and hooks described in the SPEC are used
3. Processing flow: the processing flow described in the SPEC is implemented in the code
4. Validation: the validation rules described in the SPEC are implemented
5. Error handling: the error cases described in the SPEC are handled

## Output format
Respond in the following JSON format:
```json
{{
  "matchPercentage": <number from 0 to 100>,
  "matchedItems": ["matched item 1", "matched item 2", ...],
  "unmatchedItems": ["unmatched item 1", "unmatched item 2", ...],
  "notes": "Additional comments (unimplemented features, possible improvements, etc.)"
}}
```

Output only the JSON."""


def build_verification_prompt(spec_content: str, code_contents: Mapping[str, str]) -> str:
    """Render the verification prompt.

    Files are rendered in sorted path order so the prompt is deterministic
    for a given input.

    Args:
        spec_content: Specification text, embedded verbatim
        code_contents: Mapping of file path to file content

    Returns:
        Complete user message for the model
    """
    code_section = "".join(
        FILE_SECTION_TEMPLATE.format(path=path, content=code_contents[path])
        for path in sorted(code_contents)
    )
    return VERIFICATION_PROMPT.format(spec_content=spec_content, code_section=code_section)
