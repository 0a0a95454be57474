"""
Kafka event publisher — fire-and-forget.

Publishes assessment events for downstream consumers
(dashboards, reminders, analytics sync).
Gracefully degrades if Kafka is unavailable.
"""
from __future__ import annotations

import json
import structlog
from app.core.config import get_settings
from app.schemas.assessment_response import AssessmentResponse

logger = structlog.get_logger()

_producer = None


async def _get_producer():
    global _producer
    settings = get_settings()
    if not settings.kafka_enabled:
        return None
    if _producer is None:
        from aiokafka import AIOKafkaProducer
        _producer = AIOKafkaProducer(bootstrap_servers=settings.kafka_bootstrap)
        await _producer.start()
    return _producer


def build_event(response: AssessmentResponse, user_id: str) -> dict:
    # No questionnaire answers leave the service, only the outcome.
    return {
        "event_type": "RISK_ASSESSMENT_COMPLETED",
        "assessment_id": response.assessment_id,
        "user_id": user_id,
        "assessment_type": response.assessment_type,
        "risk_level": response.result.risk_level.value,
        "risk_percentage": response.result.risk_percentage,
        "engine_version": response.engine_version,
        "evaluated_at": response.evaluated_at.isoformat(),
    }


async def publish_assessment_event(response: AssessmentResponse, user_id: str) -> None:
    settings = get_settings()
    if not settings.kafka_enabled:
        return

    try:
        producer = await _get_producer()
        if producer:
            await producer.send_and_wait(
                settings.kafka_topic_risk_events,
                json.dumps(build_event(response, user_id)).encode("utf-8"),
                key=user_id.encode("utf-8"),
            )
            logger.info("kafka_event_published", assessment_id=response.assessment_id)
    except Exception as e:
        # Fire-and-forget: log but don't fail the request
        logger.warning("kafka_publish_failed", error=str(e))


async def close_producer() -> None:
    global _producer
    if _producer is not None:
        await _producer.stop()
        _producer = None
