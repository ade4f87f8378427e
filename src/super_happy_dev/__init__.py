"""
Super Happy Dev – automated news micro-podcast pipeline.

Collects recent posts from developer/AI feeds, turns them into a two-host
dialogue with Gemini, voices it with Gemini multi-speaker TTS, uploads the
episode to Cloudinary and announces it on Mastodon.

  from super_happy_dev.application.pipeline import EpisodePipeline
  from super_happy_dev.adapters import default_adapters
  pipeline = EpisodePipeline(**default_adapters())
  episode = pipeline.run()

Any collaborator can be swapped by implementing the matching port and
injecting it (see super_happy_dev.ports).
"""

__version__ = "0.1.0"
