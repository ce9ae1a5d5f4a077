import asyncio

from ...domain.mail import MailMessage


class MockMailTransport:
    def __init__(self):
        self.sent: list[MailMessage] = []

    async def send(self, message: MailMessage) -> None:
        # simulate async send
        await asyncio.sleep(0)
        self.sent.append(message)
