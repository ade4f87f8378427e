"""Tests for the Gemini script writer and speech synthesizer with a fake client."""

import base64
import wave
from types import SimpleNamespace

import pytest

from conftest import make_item
from super_happy_dev.adapters.content import (
    OPENING_LINE,
    GeminiScriptWriter,
    build_script_prompt,
    first_text_part,
)
from super_happy_dev.adapters.tts import GeminiSpeechSynthesizer, audio_payload, write_wav
from super_happy_dev.domain.errors import SpeechSynthesisError


class FakeModels:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        return self.response


def fake_client(response):
    return SimpleNamespace(models=FakeModels(response))


def text_response(text):
    part = SimpleNamespace(text=text)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def audio_response(data):
    part = SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="audio/L16;rate=24000"))
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def enriched(title, body):
    return {**make_item(title), "body": body}


class TestBuildScriptPrompt:
    def test_numbers_stories_with_bodies(self):
        prompt = build_script_prompt([enriched("First", "Body one"), enriched("Second", "")])
        assert "[1] First\nBody one" in prompt
        assert "[2] Second\n" in prompt
        assert "[3]" not in prompt

    def test_mandates_format(self):
        prompt = build_script_prompt([enriched("First", "Body")])
        assert OPENING_LINE in prompt
        assert "“Speaker 1:” o “Speaker 2:”" in prompt
        assert "Última línea" in prompt

    def test_tone_line_precedes_opening_line(self):
        prompt = build_script_prompt([enriched("First", "Body")])
        tone = "Tono ameno, geeky/friki y claro, como una charla entre dos amigos."
        assert f"- Primera línea exacta:\n{tone}\n{OPENING_LINE}\n" in prompt


class TestFirstTextPart:
    def test_returns_text(self):
        assert first_text_part(text_response("Speaker 1: hola")) == "Speaker 1: hola"

    def test_no_candidates(self):
        assert first_text_part(SimpleNamespace(candidates=None)) == ""
        assert first_text_part(SimpleNamespace(candidates=[])) == ""

    def test_no_parts(self):
        response = SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[]))])
        assert first_text_part(response) == ""


class TestGeminiScriptWriter:
    def test_single_request_with_prompt(self):
        client = fake_client(text_response("Speaker 1: Hola"))
        writer = GeminiScriptWriter(client=client, model="gemini-test")
        stories = [enriched("First", "Body one")]

        assert writer.write_script(stories) == "Speaker 1: Hola"
        assert len(client.models.calls) == 1
        call = client.models.calls[0]
        assert call["model"] == "gemini-test"
        content = call["contents"][0]
        assert content.role == "user"
        assert content.parts[0].text == build_script_prompt(stories)

    def test_empty_response_gives_empty_script(self):
        writer = GeminiScriptWriter(client=fake_client(SimpleNamespace(candidates=[])))
        assert writer.write_script([enriched("First", "Body")]) == ""


class TestWriteWav:
    def test_container_format_and_samples(self, tmp_path):
        pcm = bytes(range(256)) * 4
        path = write_wav(str(tmp_path / "out" / "episode.wav"), pcm)
        with wave.open(path, "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == 24000
            assert wf.readframes(wf.getnframes()) == pcm


class TestAudioPayload:
    def test_bytes_passed_through(self):
        assert audio_payload(audio_response(b"\x01\x02")) == b"\x01\x02"

    def test_base64_text_decoded(self):
        encoded = base64.b64encode(b"\x01\x02\x03\x04").decode("ascii")
        assert audio_payload(audio_response(encoded)) == b"\x01\x02\x03\x04"

    def test_missing_payload_raises(self):
        with pytest.raises(SpeechSynthesisError):
            audio_payload(audio_response(None))
        with pytest.raises(SpeechSynthesisError):
            audio_payload(SimpleNamespace(candidates=[]))
        with pytest.raises(SpeechSynthesisError):
            audio_payload(SimpleNamespace(candidates=None))


class TestGeminiSpeechSynthesizer:
    def test_writes_decoded_pcm(self, tmp_path):
        pcm = b"\x10\x00\xf0\xff" * 600
        client = fake_client(audio_response(pcm))
        synth = GeminiSpeechSynthesizer(client=client, model="tts-test")
        out = str(tmp_path / "episode.wav")

        assert synth.synthesize("Speaker 1: Hola\nSpeaker 2: Qué tal", out) == out
        with wave.open(out, "rb") as wf:
            assert (wf.getnchannels(), wf.getsampwidth(), wf.getframerate()) == (1, 2, 24000)
            assert wf.readframes(wf.getnframes()) == pcm

    def test_request_uses_multi_speaker_voices(self, tmp_path):
        client = fake_client(audio_response(b"\x00\x00"))
        GeminiSpeechSynthesizer(client=client).synthesize("Speaker 1: Hola", str(tmp_path / "a.wav"))

        call = client.models.calls[0]
        assert "Speaker 1: Hola" in call["contents"][0].parts[0].text
        config = call["config"]
        assert config.response_modalities == ["AUDIO"]
        voices = {
            sv.speaker: sv.voice_config.prebuilt_voice_config.voice_name
            for sv in config.speech_config.multi_speaker_voice_config.speaker_voice_configs
        }
        assert voices == {"Speaker 1": "Kore", "Speaker 2": "Puck"}

    def test_missing_audio_raises_and_writes_nothing(self, tmp_path):
        synth = GeminiSpeechSynthesizer(client=fake_client(SimpleNamespace(candidates=[])))
        out = tmp_path / "episode.wav"
        with pytest.raises(SpeechSynthesisError):
            synth.synthesize("Speaker 1: Hola", str(out))
        assert not out.exists()
