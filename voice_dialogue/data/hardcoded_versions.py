from voice_dialogue.domain.models import (
    PlatformData,
    PlatformSettings,
    Prompt,
    RepeatType,
    SessionSettings,
    SessionType,
    Slot,
    Version,
)

# ==============================================================================
# VERSION DEFINITIONS
# ==============================================================================

# --- Pizza ordering: always starts over on a new session ---
pizza_order = Version(
    version_id="pizza_order",
    name="Pizza Order",
    root_diagram_id="pizza_order_root",
    variables=["order_total", "last_order"],
    platform_data=PlatformData(
        settings=PlatformSettings(
            session=SessionSettings(type=SessionType.RESTART),
            permissions=["alexa::profile:given_name:read"],
        ),
        slots=[
            Slot(name="size", type="PIZZA_SIZE"),
            Slot(name="topping", type="PIZZA_TOPPING"),
        ],
    ),
)

# --- Bedtime stories: asks whether to pick the story back up ---
bedtime_stories = Version(
    version_id="bedtime_stories",
    name="Bedtime Stories",
    root_diagram_id="bedtime_stories_root",
    variables=["story_index", "favorite_character"],
    platform_data=PlatformData(
        settings=PlatformSettings(
            session=SessionSettings(
                type=SessionType.RESUME,
                resume=Prompt(content="Would you like to continue the story where we left off?"),
                follow=Prompt(content="Alright, picking the story back up."),
            ),
            repeat=RepeatType.DIALOG,
        ),
        slots=[Slot(name="character", type="CHARACTER")],
    ),
)

# --- Trivia: silently continues, repeating the last question ---
daily_trivia = Version(
    version_id="daily_trivia",
    name="Daily Trivia",
    root_diagram_id="daily_trivia_root",
    variables=["score"],
    platform_data=PlatformData(
        settings=PlatformSettings(
            session=SessionSettings(type=SessionType.CONTINUE),
        ),
        slots=[Slot(name="answer", type="AMAZON.SearchQuery")],
    ),
)

# ==============================================================================
# VERSION REGISTRY
# ==============================================================================

HARDCODED_VERSIONS = {
    version.version_id: version
    for version in (pizza_order, bedtime_stories, daily_trivia)
}
