"""
Prompt templates for chat and summaries.

Dependencies: langchain_core.prompts
System role: Prompt text sent to the generation model
"""

from langchain_core.prompts import PromptTemplate

CHAT_PROMPT = PromptTemplate.from_template(
    """Answer concisely (target <= 80 words). If the files do not contain the answer, say that. Cite specific values or sections only as needed.

User question:
{question}"""
)

SUMMARY_PROMPT = PromptTemplate.from_template(
    """You are an analyst. Given a CSV sample (sales data) and a PDF excerpt (garment tracking system), summarize in JSON with two keys: "purpose" (high-level purpose of these files together) and "status" (current project progress implied by the files). Keep each <= 80 words. Avoid markdown.

CSV sample:
{csv}

PDF excerpt:
{pdf}"""
)


def build_chat_prompt(question: str) -> str:
    """Wrap the user's question in the concise-answer instruction."""
    return CHAT_PROMPT.format(question=question).strip()


def build_summary_prompt(csv_text: str, pdf_text: str) -> str:
    """Ask for a JSON purpose/status summary of both documents."""
    return SUMMARY_PROMPT.format(csv=csv_text, pdf=pdf_text).strip()
