"""
Audio UI

Speaks Russian sentences with the browser's speechSynthesis and plays short
WebAudio cues. The core only says what to play; playback is fire-and-forget.
"""

from __future__ import annotations

import json

import streamlit as st
import streamlit.components.v1 as components

SPEECH_LANG = "ru-RU"
SPEECH_RATE = 0.95

# (frequency Hz, duration s) steps per cue
CUES = {
    "tap": [(520, 0.04)],
    "good": [(660, 0.08), (880, 0.10)],
    "bad": [(220, 0.16)],
    "level": [(523, 0.10), (659, 0.10), (784, 0.10), (1047, 0.18)],
}


def _audio_script(speech: str | None, cue: str | None) -> str:
    steps = CUES.get(cue or "", [])
    return f"""
<script>
(function() {{
  const steps = {json.dumps(steps)};
  if (steps.length) {{
    try {{
      const ctx = new (window.AudioContext || window.webkitAudioContext)();
      let t = ctx.currentTime;
      for (const [freq, dur] of steps) {{
        const osc = ctx.createOscillator();
        const gain = ctx.createGain();
        osc.frequency.value = freq;
        gain.gain.setValueAtTime(0.08, t);
        gain.gain.exponentialRampToValueAtTime(0.0001, t + dur);
        osc.connect(gain).connect(ctx.destination);
        osc.start(t);
        osc.stop(t + dur);
        t += dur;
      }}
    }} catch (e) {{}}
  }}
  const text = {json.dumps(speech or "")};
  const synth = window.parent.speechSynthesis || window.speechSynthesis;
  if (text && synth) {{
    synth.cancel();
    const u = new SpeechSynthesisUtterance(text);
    u.lang = {json.dumps(SPEECH_LANG)};
    u.rate = {SPEECH_RATE};
    synth.speak(u);
  }}
}})();
</script>
"""


def play_pending_audio() -> None:
    """
    Play queued speech and cue once, then clear the queue.
    """
    speech = st.session_state.pending_speech
    cue = st.session_state.pending_sound
    st.session_state.pending_speech = None
    st.session_state.pending_sound = None
    if not speech and not cue:
        return
    components.html(_audio_script(speech, cue), height=0)
