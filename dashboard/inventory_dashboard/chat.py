"""Canned conversations for the chat page. Nothing here touches the network."""

from typing import Dict, List

ME = "You"

CORRESPONDENTS = ["Canvasser 1", "Canvasser 2", "Canvasser Group 1"]

CONVERSATIONS: Dict[str, List[Dict[str, str]]] = {
    "Canvasser 1": [
        {"sender": "Canvasser 1", "text": "Hi there! How can I help you?"},
        {"sender": ME, "text": "Just checking in on the new canvassing area."},
    ],
    "Canvasser 2": [
        {"sender": "Canvasser 2", "text": "Hello! Are we set for the upcoming event?"},
        {"sender": ME, "text": "Yes, everything is ready."},
    ],
    "Canvasser Group 1": [
        {"sender": "Canvasser Group 1", "text": "Team, please update your progress."},
        {"sender": ME, "text": "I’ve completed my area."},
    ],
}


def messages_for(correspondent: str) -> List[Dict[str, str]]:
    # Anyone not listed gets the group thread
    conversation = CONVERSATIONS.get(correspondent, CONVERSATIONS["Canvasser Group 1"])
    return [dict(message) for message in conversation]
