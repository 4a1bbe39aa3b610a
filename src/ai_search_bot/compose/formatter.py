"""Render search results as Telegram Markdown message payloads."""

from collections.abc import Sequence

from ai_search_bot.data import (
    Classification,
    EnrichedHit,
    MessagePayload,
    PayloadSection,
    SearchMetadata,
)

ERROR_NOTICE = "❌ Sorry, there was an error processing your search. Please try again."


def _title_parts(classification: Classification) -> tuple[str, str]:
    if classification.is_operator_query:
        return "🎯", "Google Dork"
    return "🔍", "Search"


def loading_notice(classification: Classification) -> MessagePayload:
    """Notice sent while a search is running."""
    if classification.is_operator_query:
        body = "🔍 Executing Google Dork search and analyzing results..."
    else:
        body = "🔍 Searching and analyzing results..."
    return MessagePayload(body=body, use_rich_formatting=False)


def no_results_notice(classification: Classification) -> MessagePayload:
    """Notice sent when the provider returned zero hits."""
    if classification.is_operator_query:
        body = (
            "❌ No results found for your Google Dork query. "
            "Try adjusting your operators or search terms."
        )
    else:
        body = "❌ No results found for your query. Please try different keywords."
    return MessagePayload(body=body, use_rich_formatting=False)


def error_notice() -> MessagePayload:
    return MessagePayload(body=ERROR_NOTICE, use_rich_formatting=False)


def format_header(
    query: str,
    classification: Classification,
    metadata: SearchMetadata,
    result_count: int,
) -> str:
    icon, label = _title_parts(classification)
    message = f'{icon} **{label} Results for:**\n`"{query}"`\n\n'

    if classification.is_operator_query and classification.context_description:
        message += f"🔧 **Search Type:** {classification.context_description}\n\n"

    message += "📊 **Search Stats:**\n"
    message += f"• Found {metadata.total_results_label} total results\n"
    message += f"• Search completed in {metadata.elapsed_seconds} seconds\n"
    message += f"• Showing top {result_count} results with AI analysis\n\n"
    message += "⬇️ **Results below:**"
    return message


def format_overview(summary: str) -> str:
    return f"🤖 **AI Overview:**\n\n{summary}\n\n📋 **Detailed Results:**"


def format_result(hit: EnrichedHit, index: int) -> str:
    message = f"**📄 Result {index}: {hit.title}**\n\n"
    message += f"🌐 **Source:** {hit.display_source}\n\n"
    message += f"📝 **Description:**\n{hit.snippet}\n\n"
    if hit.insight:
        message += f"🤖 **AI Insight:**\n*{hit.insight}*\n\n"
    message += f"🔗 **[Read Full Article]({hit.url})**"
    return message


def format_footer(classification: Classification) -> str:
    message = "✅ **Search Complete!**\n\n💡 **Tips:**\n"
    if classification.is_operator_query:
        message += "• Try /examples for more Google Dork patterns\n"
        message += "• Use /dork for operator reference\n"
        message += "• Combine multiple operators for precise results\n\n"
        message += "🔍 Ready for your next advanced search!"
    else:
        message += "• Use Google Dork operators for specific searches\n"
        message += "• Try /dork to learn advanced search techniques\n"
        message += "• Ask me anything else or refine your search\n\n"
        message += "🔍 Ready for your next search!"
    return message


def compose(
    query: str,
    classification: Classification,
    enriched_hits: Sequence[EnrichedHit],
    metadata: SearchMetadata,
    summary: str = "",
) -> list[MessagePayload]:
    """Build the ordered multi-message response.

    Order is header, overview (only when ``summary`` is non-empty), one
    payload per hit, footer.
    """
    payloads = [
        MessagePayload(
            body=format_header(query, classification, metadata, len(enriched_hits)),
            section=PayloadSection.HEADER,
        )
    ]
    if summary:
        payloads.append(
            MessagePayload(body=format_overview(summary), section=PayloadSection.OVERVIEW)
        )
    for index, hit in enumerate(enriched_hits, 1):
        payloads.append(
            MessagePayload(body=format_result(hit, index), section=PayloadSection.RESULT)
        )
    payloads.append(
        MessagePayload(body=format_footer(classification), section=PayloadSection.FOOTER)
    )
    return payloads


def compose_combined(
    query: str,
    classification: Classification,
    enriched_hits: Sequence[EnrichedHit],
    metadata: SearchMetadata,
    summary: str = "",
) -> MessagePayload:
    """Build the single-message fallback with the same sections as :func:`compose`."""
    icon, label = _title_parts(classification)
    message = f'{icon} **{label} Results for: "{query}"**\n\n'

    if classification.is_operator_query and classification.context_description:
        message += f"🔧 **Search Type:** {classification.context_description}\n\n"

    if summary:
        message += f"🤖 **AI Overview:**\n{summary}\n\n"

    message += (
        f"📊 Found {metadata.total_results_label} results "
        f"in {metadata.elapsed_seconds} seconds\n"
    )
    message += f"📋 **Top {len(enriched_hits)} Results:**\n\n"

    for index, hit in enumerate(enriched_hits, 1):
        message += f"**{index}. {hit.title}**\n"
        message += f"🌐 {hit.display_source}\n"
        message += f"📝 {hit.snippet}\n"
        if hit.insight:
            message += f"🤖 *AI Insight: {hit.insight}*\n"
        message += f"🔗 [Read more]({hit.url})\n\n"

    if classification.is_operator_query:
        message += "💡 *Tip: Try /examples for Google Dork examples or ask me anything else!*"
    else:
        message += (
            "💡 *Tip: Use Google Dork operators for specific searches or ask me anything else!*"
        )
    return MessagePayload(body=message, section=PayloadSection.NOTICE)
