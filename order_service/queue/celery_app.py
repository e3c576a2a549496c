"""
Celery application - background jobs over RabbitMQ (Redis result backend).
Used for bulk search reindexing, which is too slow for the request path.
"""

from celery import Celery

from order_service.config import get_settings

settings = get_settings()

celery_app = Celery(
    "order_service",
    broker=settings.celery_broker_url,
    backend=settings.redis_url,
    include=["order_service.queue.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    task_track_started=True,
    task_time_limit=1800,
    task_soft_time_limit=1500,
    worker_prefetch_multiplier=1,  # Fair distribution
)
