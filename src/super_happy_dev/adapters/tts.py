"""ISpeechSynthesizer adapter: Gemini multi-speaker TTS, framed as WAV."""

import base64
import os
import wave
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from super_happy_dev import config
from super_happy_dev.domain.errors import SpeechSynthesisError
from super_happy_dev.ports.interfaces import ISpeechSynthesizer

TTS_INSTRUCTION = "TTS esta conversación entre Happy (Speaker 1) y Dev (Speaker 2):"


def write_wav(
    path: str,
    pcm: bytes,
    channels: int = config.AUDIO_CHANNELS,
    sample_width: int = config.AUDIO_SAMPLE_WIDTH,
    rate: int = config.AUDIO_SAMPLE_RATE,
) -> str:
    """Wrap raw PCM in a WAV container. The file is flushed and closed on return."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with wave.open(path, "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(sample_width)
        wf.setframerate(rate)
        wf.writeframes(pcm)
    return path


def build_speech_config(speaker_voices: Dict[str, str]) -> types.SpeechConfig:
    return types.SpeechConfig(
        multi_speaker_voice_config=types.MultiSpeakerVoiceConfig(
            speaker_voice_configs=[
                types.SpeakerVoiceConfig(
                    speaker=speaker,
                    voice_config=types.VoiceConfig(
                        prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice),
                    ),
                )
                for speaker, voice in speaker_voices.items()
            ]
        )
    )


def audio_payload(response: Any) -> bytes:
    """Decoded PCM from the first candidate's inline data."""
    try:
        data = response.candidates[0].content.parts[0].inline_data.data
    except (AttributeError, IndexError, TypeError):
        data = None
    if not data:
        raise SpeechSynthesisError("speech model returned no audio payload")
    # The SDK already decodes base64; raw REST-style payloads arrive as text
    if isinstance(data, str):
        return base64.b64decode(data)
    return data


class GeminiSpeechSynthesizer(ISpeechSynthesizer):
    """Voices a Speaker 1 / Speaker 2 script with one prebuilt voice per speaker."""

    def __init__(
        self,
        client: Optional[Any] = None,
        model: str = config.GEMINI_TTS_MODEL,
        speaker_voices: Optional[Dict[str, str]] = None,
    ):
        self._client = client or genai.Client(api_key=config.GEMINI_API_KEY)
        self._model = model
        self._speaker_voices = speaker_voices or config.SPEAKER_VOICES

    def synthesize(self, script: str, output_path: str) -> str:
        response = self._client.models.generate_content(
            model=self._model,
            contents=[types.Content(parts=[types.Part(text=f"{TTS_INSTRUCTION}\n{script}")])],
            config=types.GenerateContentConfig(
                response_modalities=["AUDIO"],
                speech_config=build_speech_config(self._speaker_voices),
            ),
        )
        pcm = audio_payload(response)
        return write_wav(output_path, pcm)
