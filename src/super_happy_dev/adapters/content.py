"""IScriptWriter adapter: Gemini text generation via google-genai."""

from typing import Any, List, Optional

from google import genai
from google.genai import types

from super_happy_dev import config
from super_happy_dev.domain.models import EnrichedStory
from super_happy_dev.ports.interfaces import IScriptWriter

OPENING_LINE = "Speaker 1: Hola, bienvenidos al podcast de Super Happy Dev."

SCRIPT_PROMPT_TEMPLATE = """
Eres guionista de "Super Happy Dev", un micro-podcast de noticias para devs en LatAm.
Escribe una charla natural entre dos amigos (Happy y Dev). Tono: ameno, geeky, claro, sin muletillas artificiales.
Reglas:
FORMATO DE SALIDA (OBLIGATORIO):
- Solo líneas que comiencen con “Speaker 1:” o “Speaker 2:”.
- Primera línea exacta:
Tono ameno, geeky/friki y claro, como una charla entre dos amigos.
{opening_line}
- Después de esa línea, establece el tono únicamente con el diálogo. No uses acotaciones, efectos, notas, encabezados, emojis, guiones de escena ni texto fuera del diálogo.
- Última línea: despedida clara que invite a seguir el podcast (por ejemplo: “gracias por escuchar, hasta la siguiente semana”).

Noticias (título + resumen):
{stories}
"""


def format_stories(stories: List[EnrichedStory]) -> str:
    """Numbered `[n] title` + body blocks, one blank line apart."""
    return "\n\n".join(
        f"[{i}] {story['title']}\n{story.get('body') or ''}"
        for i, story in enumerate(stories, 1)
    )


def build_script_prompt(stories: List[EnrichedStory]) -> str:
    return SCRIPT_PROMPT_TEMPLATE.format(
        opening_line=OPENING_LINE,
        stories=format_stories(stories),
    )


def first_text_part(response: Any) -> str:
    """Text of the first candidate's first part, or '' if the model returned none."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return ""
    return getattr(parts[0], "text", None) or ""


class GeminiScriptWriter(IScriptWriter):
    """Asks Gemini for the episode dialogue in a single, non-streaming request."""

    def __init__(self, client: Optional[Any] = None, model: str = config.GEMINI_SCRIPT_MODEL):
        self._client = client or genai.Client(api_key=config.GEMINI_API_KEY)
        self._model = model

    def write_script(self, stories: List[EnrichedStory]) -> str:
        prompt = build_script_prompt(stories)
        response = self._client.models.generate_content(
            model=self._model,
            contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
        )
        return first_text_part(response)
