"""
Tests for citizen notifications and the RabbitMQ publisher.
"""

import json

import pytest
from unittest.mock import patch

from seniors import notifications
from seniors.rabbitmq import publisher
from seniors.rabbitmq.publisher import RabbitMQPublisher


@pytest.fixture
def broker_enabled(settings):
    settings.NOTIFICATIONS_BROKER_ENABLED = True
    return settings


class TestLocalNotifications:
    """Broker disabled: messages are only logged."""

    @patch("seniors.notifications.logger")
    def test_sms_is_logged(self, mock_logger):
        assert notifications.send_sms("0917", "Hello") is True

        mock_logger.info.assert_called_once_with("[LOCAL-SMS] To: 0917 | Message: Hello")

    @patch("seniors.notifications.publisher.publish_sms")
    def test_nothing_published_when_broker_disabled(self, mock_publish):
        notifications.send_sms("0917", "Hello")

        mock_publish.assert_not_called()

    @patch("seniors.notifications.send_email")
    @patch("seniors.notifications.send_sms")
    def test_approval_message(self, mock_sms, mock_email):
        notifications.notify_status_update(
            "JUAN DELA CRUZ", "0917", "juan@example.com", "Registration", "Approved"
        )

        mock_sms.assert_called_once_with(
            "0917", "Hello JUAN DELA CRUZ, your Registration application was APPROVED."
        )
        mock_email.assert_called_once()
        assert mock_email.call_args[0][1] == "SeniorConnect: Registration Update"

    @patch("seniors.notifications.send_email")
    @patch("seniors.notifications.send_sms")
    def test_rejection_message_carries_reason(self, mock_sms, mock_email):
        notifications.notify_status_update("ANA", "0917", "", "New ID", "Rejected", "Blurry photo")

        mock_sms.assert_called_once_with(
            "0917", "Hello ANA, your New ID application was DISAPPROVED. Reason: Blurry photo"
        )
        mock_email.assert_not_called()

    @patch("seniors.notifications.send_email")
    def test_registration_success_emails_when_address_known(self, mock_email):
        notifications.notify_registration_success("ANA", "0917", "ana@example.com")
        notifications.notify_registration_success("BEN", "0918", "")

        mock_email.assert_called_once()
        assert mock_email.call_args[0][0] == "ana@example.com"
        assert mock_email.call_args[0][1] == "Complete Registration!"


class TestBrokerNotifications:

    @patch("seniors.notifications.publisher.publish_sms", return_value=True)
    def test_sms_published(self, mock_publish, broker_enabled):
        assert notifications.send_sms("0917", "Hello") is True

        mock_publish.assert_called_once_with("0917", "Hello")

    @patch("seniors.notifications.publisher.publish_sms")
    def test_sms_without_number_not_published(self, mock_publish, broker_enabled):
        notifications.send_sms("", "Hello")

        mock_publish.assert_not_called()

    @patch("seniors.notifications.publisher.publish_email", return_value=False)
    def test_email_publish_failure_is_reported(self, mock_publish, broker_enabled):
        assert notifications.send_email("a@b.c", "Subject", "Body", "Ana") is False

        mock_publish.assert_called_once_with("a@b.c", "Subject", "Body", "Ana")


class TestRabbitMQPublisher:

    def test_declares_notification_queues(self, mock_pika_connection):
        _, channel = mock_pika_connection

        RabbitMQPublisher()

        declared = {call.kwargs["queue"] for call in channel.queue_declare.call_args_list}
        assert declared == {"notification.sms", "notification.email"}

    def test_publish_sms(self, mock_pika_connection):
        _, channel = mock_pika_connection

        assert RabbitMQPublisher().publish_sms("0917", "Hello") is True

        kwargs = channel.basic_publish.call_args.kwargs
        assert kwargs["routing_key"] == "notification.sms"
        assert json.loads(kwargs["body"]) == {"to": "0917", "message": "Hello"}
        assert kwargs["properties"].delivery_mode == 2

    def test_publish_email(self, mock_pika_connection):
        _, channel = mock_pika_connection

        RabbitMQPublisher().publish_email("a@b.c", "Subject", "Body", "Ana")

        kwargs = channel.basic_publish.call_args.kwargs
        assert kwargs["routing_key"] == "notification.email"
        assert json.loads(kwargs["body"]) == {
            "to": "a@b.c",
            "toName": "Ana",
            "subject": "Subject",
            "body": "Body",
        }

    def test_publish_failure_returns_false(self, mock_pika_connection):
        _, channel = mock_pika_connection
        channel.basic_publish.side_effect = Exception("Channel closed")

        assert RabbitMQPublisher().publish_sms("0917", "Hello") is False

    def test_connection_failure(self, mocker):
        mocker.patch("pika.BlockingConnection", side_effect=Exception("Connection refused"))

        assert RabbitMQPublisher().publish_sms("0917", "Hello") is False

    def test_module_functions_use_shared_publisher(self, mock_pika_connection, mocker):
        mocker.patch.object(publisher, "_publisher", None)

        assert publisher.publish_sms("0917", "Hello") is True
        assert publisher.get_publisher() is publisher.get_publisher()
