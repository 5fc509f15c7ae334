"""Collaborator capabilities: randomness, output sinks, speech styles."""
from .randomness import NumpyRandomSource, RandomSource, ScriptedRandomSource
from .output import ListSink, OutputSink, StreamSink, TeeSink
from .speech import AffiliationSpeech, SpeechStyle, TitledSpeech, rank_title_speech

__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "ScriptedRandomSource",
    "OutputSink",
    "StreamSink",
    "ListSink",
    "TeeSink",
    "SpeechStyle",
    "AffiliationSpeech",
    "TitledSpeech",
    "rank_title_speech",
]
