import logging
from ..config import Settings
from ..content.resolver import ArticleResolver
from ..errors import StageError
from ..llm.client import LLMClient
from ..llm.hashtags import HashtagGenerator
from ..schemas.outputs import PipelineOutcome, PipelineState, Stage
from ..social.publisher import Publisher
from ..telegram.format import format_failure, format_success
from ..telegram.notifier import ParseMode, TelegramNotifier
from ..telegram.parse import is_url_trigger
from .capabilities import ArticleSource, HashtagSource, Notifier, PostPublisher

logger = logging.getLogger("pipeline")

class Pipeline:
    """
    Runs one trigger through resolve -> generate -> publish.

    Stage failures never escape run(): they are turned into a plain-text
    notification and a FAILED outcome, so the webhook can always answer 200.
    """

    def __init__(
        self,
        resolver: ArticleSource,
        hashtagger: HashtagSource,
        publisher: PostPublisher,
        notifier: Notifier,
    ):
        self.resolver = resolver
        self.hashtagger = hashtagger
        self.publisher = publisher
        self.notifier = notifier

    @classmethod
    def from_settings(cls, settings: Settings) -> "Pipeline":
        return cls(
            resolver=ArticleResolver(settings),
            hashtagger=HashtagGenerator(LLMClient(settings)),
            publisher=Publisher(settings),
            notifier=TelegramNotifier(settings),
        )

    def run(self, text: str) -> PipelineOutcome:
        outcome = PipelineOutcome(identifier=text)
        logger.info(f"Received message: {text}")

        if is_url_trigger(text):
            logger.info("Received a URL instead of an ID. Ignoring so Telegram stops redelivering it.")
            outcome.state = PipelineState.SKIPPED
            return outcome
        outcome.state = PipelineState.VALIDATED

        try:
            stage = Stage.RESOLVE
            article = self.resolver.resolve(text)
            outcome.state = PipelineState.RESOLVED
            logger.info(f"Article data fetched: {article.title}")

            stage = Stage.GENERATE
            hashtags = self.hashtagger.generate(article.title, article.description)
            outcome.state = PipelineState.HASHTAGS_READY
            logger.info(f"Hashtags generated: {hashtags}")

            stage = Stage.PUBLISH
            result = self.publisher.publish(article, text, hashtags)
            outcome.state = PipelineState.PUBLISHED
            outcome.post_id = result.post_id
            logger.info(f"Post published for article {text}")
        except StageError as e:
            logger.error(f"Stage {stage.value} failed for article {text}: {e}")
            return self._absorb(outcome, stage, str(e))
        except Exception as e:
            logger.exception(f"Unexpected error in stage {stage.value} for article {text}")
            return self._absorb(outcome, stage, str(e))

        return outcome

    def _absorb(self, outcome: PipelineOutcome, stage: Stage, reason: str) -> PipelineOutcome:
        outcome.state = PipelineState.FAILED
        outcome.failed_stage = stage
        outcome.reason = reason
        self.notifier.notify(format_failure(stage.value, outcome.identifier, reason), ParseMode.PLAIN)
        return outcome

    def acknowledge(self, outcome: PipelineOutcome) -> None:
        """
        Send the success notification. Called after the webhook has answered.
        """
        if outcome.state is not PipelineState.PUBLISHED:
            return
        outcome.state = PipelineState.ACKNOWLEDGED
        self.notifier.notify(format_success(outcome.identifier), ParseMode.MARKDOWN_V2)
