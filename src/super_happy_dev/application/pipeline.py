"""
Episode pipeline – single responsibility: orchestrate collect → enrich → script → TTS → upload → announce.
Depends only on port interfaces (SOLID – Dependency Inversion).
"""

import os
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from super_happy_dev import config
from super_happy_dev.application.collector import collect_recent_stories
from super_happy_dev.application.enricher import enrich_stories
from super_happy_dev.domain.models import PublishedEpisode
from super_happy_dev.ports.interfaces import (
    IFeedSource,
    IArticleExtractor,
    IScriptWriter,
    ISpeechSynthesizer,
    IMediaHost,
    ISocialPoster,
)


def episode_public_id(run_id: str, now: Optional[datetime] = None) -> str:
    """`<prefix>-<YYYY-MM-DD>-<run id>`, dated in UTC."""
    date_tag = (now or datetime.now(timezone.utc)).strftime("%Y-%m-%d")
    return f"{config.PUBLIC_ID_PREFIX}-{date_tag}-{run_id}"


def announcement_text(cdn_url: str, caption: str = config.ANNOUNCEMENT_CAPTION) -> str:
    return f"{caption}\n\n{config.ANNOUNCEMENT_LINK_LABEL} {cdn_url}"


class EpisodePipeline:
    """
    Orchestrates one episode run, strictly in sequence.
    All dependencies are injected (ports); no concrete implementations here.
    Errors other than per-feed and per-article failures propagate to the caller.
    """

    def __init__(
        self,
        *,
        feed_source: IFeedSource,
        article_extractor: IArticleExtractor,
        script_writer: IScriptWriter,
        speech_synthesizer: ISpeechSynthesizer,
        media_host: IMediaHost,
        social_poster: ISocialPoster,
        feed_urls: Iterable[str] = config.RSS_FEEDS,
        output_dir: str = config.OUTPUT_DIR,
        publish: bool = True,
    ):
        self._feeds = feed_source
        self._extractor = article_extractor
        self._writer = script_writer
        self._tts = speech_synthesizer
        self._media = media_host
        self._social = social_poster
        self._feed_urls = list(feed_urls)
        self._output_dir = output_dir
        self._publish = publish

    def run(self) -> PublishedEpisode:
        """Produce and publish one episode. Returns audio path, CDN URL and status URL."""
        print("=" * 60)
        print("Generating Super Happy Dev episode...")
        print("=" * 60)

        print(f"\n[1/5] Fetching recent stories from {len(self._feed_urls)} feeds...")
        stories = collect_recent_stories(self._feeds, self._feed_urls)
        print(f"Selected {len(stories)} stories:")
        for i, story in enumerate(stories, 1):
            print(f"  {i}. {story['title'][:60]}")

        print("\n[2/5] Enriching stories and generating episode script...")
        enriched = enrich_stories(stories, self._extractor)
        script = self._writer.write_script(enriched)
        if not script:
            print("⚠️  Script writer returned no text; continuing with an empty script")
        else:
            print(f"Script length: {len(script)} characters, {len(script.splitlines())} lines")

        print("\n[3/5] Generating multi-speaker TTS audio...")
        run_id = str(uuid.uuid4())
        wav_path = os.path.join(self._output_dir, f"episode-{run_id}.wav")
        audio_path = self._tts.synthesize(script, wav_path)
        print(f"✅ Audio saved to: {audio_path}")

        if not self._publish:
            print("\nPublishing disabled; episode kept locally.")
            return {"audio_path": audio_path, "cdn_url": "", "status_url": ""}

        print("\n[4/5] Uploading episode to Cloudinary...")
        cdn_url = self._media.upload_audio(audio_path, episode_public_id(run_id))
        print(f"✅ Uploaded: {cdn_url}")

        print("\n[5/5] Posting to Mastodon...")
        status_url = self._social.post_status(announcement_text(cdn_url))
        print(f"\n🎉 Published at: {status_url}")

        return {"audio_path": audio_path, "cdn_url": cdn_url, "status_url": status_url}
