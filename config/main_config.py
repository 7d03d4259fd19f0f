import os
from dotenv import load_dotenv


load_dotenv()

REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
REDIS_PORT = int(os.getenv('REDIS_PORT', '6379'))
REDIS_DB = int(os.getenv('REDIS_DB', '0'))

# External identity provider used to validate bearer tokens
AUTH_URL = os.getenv('AUTH_URL', 'http://localhost:54321/auth/v1')
AUTH_API_KEY = os.getenv('AUTH_API_KEY', '')

HTTP_HOST = os.getenv('HTTP_HOST', '0.0.0.0')
HTTP_PORT = int(os.getenv('HTTP_PORT', '8080'))

RANKING_CACHE_TTL_MS = int(os.getenv('RANKING_CACHE_TTL_MS', '30000'))
POINTS_PER_CORRECT_ANSWER = int(os.getenv('POINTS_PER_CORRECT_ANSWER', '100'))
# Seconds per question when the quiz does not define its own limit
DEFAULT_TIME_LIMIT = int(os.getenv('DEFAULT_TIME_LIMIT', '30'))

LOG_FILE = os.getenv('LOG_FILE', 'app.log')
