import os
from dotenv import load_dotenv

load_dotenv()

# Syndication feeds, processed in this order (earlier feeds win on duplicates)
RSS_FEEDS = [
    # AI
    "https://ai.googleblog.com/feeds/posts/default?alt=rss",
    "https://openai.com/blog/rss",
    # Web/dev
    "https://developer.chrome.com/feeds/blog.xml",
    "https://nodejs.org/en/feed/blog.xml",
    "https://webkit.org/feed/",
    "https://www.typescriptlang.org/feed.xml",
    "https://news.mit.edu/rss/topic/artificial-intelligence2",
]

# Collection
RECENCY_HOURS = 48
MAX_STORIES = 6
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))  # seconds, feeds and article pages
USER_AGENT = os.getenv("USER_AGENT", "Mozilla/5.0 (compatible; SuperHappyDevBot/0.1)")

# Enrichment
SUMMARY_MIN_CHARS = 200  # feed summaries longer than this are used as-is
BODY_MAX_CHARS = 4000

# Gemini (text + speech)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_SCRIPT_MODEL = os.getenv("GEMINI_SCRIPT_MODEL", "gemini-2.5-pro")  # quality for writing
GEMINI_TTS_MODEL = os.getenv("GEMINI_TTS_MODEL", "gemini-2.5-flash-preview-tts")

# Speaker label in the script -> Gemini prebuilt voice
SPEAKER_VOICES = {
    "Speaker 1": "Kore",  # Happy
    "Speaker 2": "Puck",  # Dev
}

# Gemini TTS returns raw PCM: mono, 16-bit, 24 kHz
AUDIO_CHANNELS = 1
AUDIO_SAMPLE_WIDTH = 2  # bytes
AUDIO_SAMPLE_RATE = 24000

# Cloudinary
CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME", "")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY", "")
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET", "")
CLOUDINARY_FOLDER = "super-happy-dev"
PUBLIC_ID_PREFIX = "shd"

# Mastodon
MASTODON_URL = os.getenv("MASTODON_URL", "")
MASTODON_TOKEN = os.getenv("MASTODON_TOKEN", "")
ANNOUNCEMENT_CAPTION = "Nuevo episodio de Super Happy Dev 🎧"
ANNOUNCEMENT_LINK_LABEL = "Escúchalo aquí:"

# Output directory for episode audio (files are left in place after upload)
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")
