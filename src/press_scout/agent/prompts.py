from typing import List

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate, PromptTemplate

from ..query import QueryAnalysis
from ..schemas import SearchResult


SCOUT_SYSTEM_PROMPT = """
You are Fine Press Scout, a knowledgeable assistant helping collectors discover and
purchase limited-edition fine press books.

Ground rules:
1. Only recommend books from the Retrieved Titles list. Never invent titles, authors, prices or publishers.
2. Quote prices exactly as given. If a price reads "price on request", say so; never quote $0.
3. Mention the edition type when it is not Standard.
4. Respect the budget. Never recommend a title above the user's stated budget.
5. Flag currency when it matters; some prices are in GBP or EUR.
6. Keep it concise: 2-4 sentences per title.

If nothing matches, say so honestly and suggest broadening the criteria.
"""


UNAVAILABLE_CONTEXT = "Retrieved Titles: (search service temporarily unavailable)"


RECOMMENDATION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SCOUT_SYSTEM_PROMPT),
    ("system", "{context}"),
    ("human", "{input}"),
])


BOOK_CONTEXT_PROMPT = PromptTemplate.from_template(
"""
{understood}

{titles}

Question: {input}
"""
)


def build_context_block(results: List[SearchResult]) -> str:
    """Render retrieved titles for injection before the LLM call."""
    if not results:
        return "Retrieved Titles: none found matching the current filters."

    lines = [
        f'{i}. "{r.title}" by {r.author} | {r.publisher} | {r.edition_type} edition | '
        f"{r.price_label} | {r.availability} | {r.url}"
        for i, r in enumerate(results, start=1)
    ]
    return "Retrieved Titles (matching your filters):\n" + "\n".join(lines)


def describe_analysis(analysis: QueryAnalysis) -> str:
    """Human-readable 'here is what I understood' line."""
    understood = analysis.extracted_filters.to_dict()
    if not understood:
        return "Understood: no specific filters, ranking by similarity only."

    parts = []
    for name, value in understood.items():
        if isinstance(value, list):
            value = ", ".join(value)
        parts.append(f"{name.replace('_', ' ')}: {value}")
    return f"Understood: {'; '.join(parts)} (coverage {analysis.confidence:.0%})."


def build_scout_prompt(query: str, analysis: QueryAnalysis, results: List[SearchResult]) -> str:
    return BOOK_CONTEXT_PROMPT.format(
        understood=describe_analysis(analysis),
        titles=build_context_block(results),
        input=query,
    )


def build_recommendation_messages(query: str, context: str) -> List[BaseMessage]:
    """System prompt, retrieved-titles context, then the user's message."""
    return RECOMMENDATION_PROMPT.format_messages(context=context, input=query)
