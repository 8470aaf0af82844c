"""
Confirmation messages for parsed commands

The chat panel answers every message with one of these canned sentences.
Commands under the clarification threshold always get the clarification
request, whatever their action.
"""

from models.command import ParsedCommand
from models.enums import CommandAction, VisualizationType, FeatureTag

CLARIFICATION_MESSAGE = (
    "I'm not sure I understood your request. Could you please be more specific "
    "about what you'd like to change in the bubble sort visualization?"
)

GENERIC_MESSAGE = (
    "I understand you want to make changes to the visualization. "
    "Let me implement those improvements for you!"
)

FEATURE_MESSAGES = {
    FeatureTag.COLOR_CODING: "I'll add color coding to make it easier to track the sorting process!",
    FeatureTag.SOUND_EFFECTS: "I'll add sound effects to enhance the interactive experience!",
    FeatureTag.STEP_EXPLANATION: (
        "I'll add detailed step-by-step explanations to help understand the algorithm better!"
    ),
}


def describe_command(command: ParsedCommand, threshold: float = 0.3) -> str:
    if command.confidence < threshold:
        return CLARIFICATION_MESSAGE

    params = command.parameters
    action = command.action

    if action == CommandAction.CHANGE_VISUALIZATION:
        if params.visualization_type == VisualizationType.BUTTONS and params.height_representation:
            return (
                "I'll change the visualization to show buttons as columns where the height "
                "represents the numbers. This will make it easier to see the relative sizes!"
            )
        if params.visualization_type == VisualizationType.COLUMNS:
            return "I'll switch the visualization to use columns instead of the current format."
        if params.visualization_type == VisualizationType.BARS:
            return "I'll change the visualization to use bars for better visual representation."

    elif action == CommandAction.CHANGE_NUMBERS:
        if params.numbers:
            joined = ", ".join(str(n) for n in params.numbers)
            return f"I'll update the numbers to: {joined}. This will give us a fresh set of data to sort!"

    elif action == CommandAction.CHANGE_SPEED:
        if params.speed_ms:
            speed_text = "faster" if params.speed_ms < 1000 else "slower"
            return f"I'll adjust the animation speed to {params.speed_ms}ms for {speed_text} visualization."

    elif action == CommandAction.CHANGE_LAYOUT:
        if params.layout is not None:
            return f"I'll change the layout to {params.layout.value} arrangement for better visualization."

    elif action == CommandAction.ADD_FEATURE:
        if params.feature in FEATURE_MESSAGES:
            return FEATURE_MESSAGES[params.feature]

    return GENERIC_MESSAGE
