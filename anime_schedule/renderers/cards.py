"""HTML card rendering for schedule records."""

from typing import Iterable

from markupsafe import Markup

from ..models.schedule import ScheduleRecord

EMPTY_STATE_HTML = Markup(
    '<p class="text-xl font-inter text-gray-400 text-center col-span-full">'
    "No anime details found for the requested titles. Try adding more!"
    "</p>"
)


def _next_episode_html(info: str) -> Markup:
    # Sentences with an episode number get the highlighted style
    if "Ep" in info:
        return Markup(
            '<div class="info-section next-episode-info">'
            '<i class="fas fa-clock mr-2"></i>'
            '<span class="value">{}</span>'
            "</div>"
        ).format(info)
    return Markup(
        '<div class="info-section">'
        '<i class="fas fa-info-circle mr-2"></i>'
        '<span class="value">{}</span>'
        "</div>"
    ).format(info)


def _site_url_html(site_url: str | None) -> Markup:
    if site_url:
        return Markup(
            '<div class="info-section">'
            '<i class="fas fa-external-link-alt mr-2"></i>'
            '<a href="{}" target="_blank" rel="noopener noreferrer" '
            'class="value text-purple-300 hover:underline">Anilist</a>'
            "</div>"
        ).format(site_url)
    return Markup(
        '<div class="info-section">'
        '<i class="fas fa-external-link-alt mr-2"></i>'
        '<span class="value text-gray-400">Not Available</span>'
        "</div>"
    )


def create_anime_card_html(anime: ScheduleRecord) -> Markup:
    """Render one schedule record as an anime card.

    Every interpolated value is escaped by Markup.format.
    """
    return Markup(
        '<div class="anime-card rounded-2xl shadow-xl p-5 flex flex-col items-center text-center">'
        '<img src="{cover}" alt="{name} Cover" '
        'class="w-full object-cover rounded-lg mb-4 shadow-lg border-2 border-transparent">'
        '<h3 class="text-3xl font-poppins font-bold mb-2 leading-tight">{name}</h3>'
        '<div class="text-sm space-y-3 w-full">{next_episode}{site_url}</div>'
        "</div>"
    ).format(
        cover=anime.cover_image,
        name=anime.english_name,
        next_episode=_next_episode_html(anime.next_episode_info),
        site_url=_site_url_html(anime.site_url),
    )


def render_anime_list(records: Iterable[ScheduleRecord]) -> Markup:
    """Concatenate cards for all records, or the empty-state message."""
    cards = [create_anime_card_html(record) for record in records]
    if not cards:
        return EMPTY_STATE_HTML
    return Markup("\n").join(cards)
