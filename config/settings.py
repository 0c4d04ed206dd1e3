import os
from dotenv import load_dotenv

# Only load the .env file if we're not running inside a container task
if os.environ.get("CONTAINER") != "true":
    load_dotenv()

# Flask Configuration
SECRET_KEY = os.getenv('SECRET_KEY', 'a_very_secret_key_that_should_be_changed')
CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

# Server Configuration
PORT = int(os.getenv('PORT', 8080))
LOG_CONFIG = os.getenv('LOG_CONFIG', 'production')  # development, production

# State store Configuration
STORE_BACKEND = os.getenv('STORE_BACKEND', 'redis')  # redis, memory
REDIS_URL = os.getenv('REDIS_URL')
REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
REDIS_DB = int(os.getenv('REDIS_DB', 0))
REDIS_PASSWORD = os.getenv('REDIS_PASSWORD', None)
REDIS_SOCKET_TIMEOUT = float(os.getenv('REDIS_SOCKET_TIMEOUT', 5))

# 0 disables expiry; lobbies are then kept until removed outside this service
LOBBY_TTL_SECONDS = int(os.getenv('LOBBY_TTL_SECONDS', 0))

# Task launcher Configuration
LAUNCHER_BACKEND = os.getenv('LAUNCHER_BACKEND', 'ecs')  # ecs, local
AWS_REGION = os.getenv('AWS_REGION', 'us-east-1')
ECS_CLUSTER = os.getenv('ECS_CLUSTER', 'lobbies')
ECS_TASK_DEFINITION = os.getenv('ECS_TASK_DEFINITION', 'lobby-server')
ECS_CONTAINER_NAME = os.getenv('ECS_CONTAINER_NAME', 'lobby-server')
ECS_SUBNETS = [s for s in os.getenv('ECS_SUBNETS', '').split(',') if s]
ECS_SECURITY_GROUPS = [s for s in os.getenv('ECS_SECURITY_GROUPS', '').split(',') if s]
ECS_ASSIGN_PUBLIC_IP = os.getenv('ECS_ASSIGN_PUBLIC_IP', 'ENABLED')
ECS_CONNECT_TIMEOUT = float(os.getenv('ECS_CONNECT_TIMEOUT', 5))
ECS_READ_TIMEOUT = float(os.getenv('ECS_READ_TIMEOUT', 10))
