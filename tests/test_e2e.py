"""End-to-end tests: require a running gateway (and provider key) or are skipped."""

import io
import os
import wave

import pytest

E2E = os.environ.get("RUN_E2E", "").lower() in ("1", "true", "yes")
pytestmark = pytest.mark.skipif(not E2E, reason="E2E tests disabled (set RUN_E2E=1)")

GATEWAY_URL = os.environ.get("GATEWAY_URL", "http://localhost:5000")


def _silence_wav(seconds: float = 1.0, sample_rate: int = 16000) -> bytes:
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(b"\x00\x00" * int(seconds * sample_rate))
    return buf.getvalue()


@pytest.mark.asyncio
async def test_gateway_upload():
    import httpx

    wav_path = os.environ.get("E2E_WAV")
    if wav_path:
        with open(wav_path, "rb") as f:
            audio = f.read()
    else:
        audio = _silence_wav()

    async with httpx.AsyncClient(timeout=120) as client:
        resp = await client.post(
            f"{GATEWAY_URL}/upload",
            files={"audio": ("demo.wav", audio, "audio/wav")},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "completed"
        assert "transcript" in data
        assert "orderedSegments" in data


@pytest.mark.asyncio
async def test_gateway_normalize():
    import httpx

    async with httpx.AsyncClient(timeout=30) as client:
        resp = await client.post(
            f"{GATEWAY_URL}/normalize",
            json={"text": "[Speaker 1]: hello [Speaker 2]: world"},
        )
        assert resp.status_code == 200
        assert resp.json()["speakers"] == ["Speaker 1", "Speaker 2"]
