import json
import logging
import pika
from django.conf import settings

logger = logging.getLogger(__name__)


def notification_queues() -> tuple:
    return (settings.RABBITMQ_SMS_QUEUE, settings.RABBITMQ_EMAIL_QUEUE)


class RabbitMQPublisher:
    """
    Queues outbound citizen notifications for a delivery worker.

    One blocking connection per process. A failed publish drops the
    connection and the next publish reconnects.
    """

    def __init__(self):
        self.connection = None
        self.channel = None
        self._connect()

    def _connect(self):
        try:
            parameters = pika.ConnectionParameters(
                host=settings.RABBITMQ_HOST,
                port=settings.RABBITMQ_PORT,
                virtual_host=settings.RABBITMQ_VHOST,
                credentials=pika.PlainCredentials(
                    settings.RABBITMQ_USER, settings.RABBITMQ_PASSWORD
                ),
                heartbeat=600,
                blocked_connection_timeout=300,
            )
            self.connection = pika.BlockingConnection(parameters)
            self.channel = self.connection.channel()
            for queue in notification_queues():
                self.channel.queue_declare(queue=queue, durable=True)
            logger.info(f"Notification publisher connected to {settings.RABBITMQ_HOST}")
        except Exception as e:
            logger.error(f"Notification publisher could not connect: {str(e)}")
            self.connection = None
            self.channel = None

    def _ensure_channel(self) -> bool:
        if self.channel:
            return True
        logger.warning("No RabbitMQ channel, reconnecting")
        self._connect()
        return self.channel is not None

    def _publish(self, queue: str, message: dict) -> bool:
        """
        Publish one persistent JSON message.

        Returns:
            bool: True if the broker accepted it, False otherwise
        """
        if not self._ensure_channel():
            logger.error(f"Dropped {queue} message to {message.get('to')}: broker unreachable")
            return False

        try:
            self.channel.basic_publish(
                exchange="",
                routing_key=queue,
                body=json.dumps(message),
                properties=pika.BasicProperties(delivery_mode=2, content_type="application/json"),
            )
        except Exception as e:
            logger.error(f"Failed to publish {queue} message: {str(e)}")
            self._close()
            return False

        logger.info(f"Queued {queue} message to {message.get('to')}")
        return True

    def publish_sms(self, to: str, message: str) -> bool:
        return self._publish(settings.RABBITMQ_SMS_QUEUE, {"to": to, "message": message})

    def publish_email(self, to: str, subject: str, body: str, to_name: str = "User") -> bool:
        return self._publish(
            settings.RABBITMQ_EMAIL_QUEUE,
            {"to": to, "toName": to_name, "subject": subject, "body": body},
        )

    def _close(self):
        try:
            if self.connection and not self.connection.is_closed:
                self.connection.close()
        except Exception as e:
            logger.error(f"Error closing RabbitMQ connection: {str(e)}")
        finally:
            self.connection = None
            self.channel = None

    def __del__(self):
        self._close()


_publisher = None


def get_publisher() -> RabbitMQPublisher:
    """Get or create the process-wide publisher."""
    global _publisher
    if _publisher is None:
        _publisher = RabbitMQPublisher()
    return _publisher


def publish_sms(to: str, message: str) -> bool:
    """
    Queue an SMS for the delivery worker.

    Args:
        to: Mobile number
        message: Message text
    """
    return get_publisher().publish_sms(to, message)


def publish_email(to: str, subject: str, body: str, to_name: str = "User") -> bool:
    """Queue an email for the delivery worker."""
    return get_publisher().publish_email(to, subject, body, to_name)
