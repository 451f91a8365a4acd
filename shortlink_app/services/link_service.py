import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.orm import Session, sessionmaker

from shortlink_app.config import settings
from shortlink_app.database.bounded import record_best_effort, run_bounded
from shortlink_app.exceptions import LinkNotFound, MalformedURL
from shortlink_app.models.link import Link, LinkStatistic
from shortlink_app.schemas.link import CounterLinkStatistics, LinkResponse, normalize_url
from shortlink_app.services.id_generator_factory import IdGeneratorFactory
from shortlink_app.services.id_generators import IdGenerator

logger = logging.getLogger(__name__)


class LinkService:
    """
    Link Service with the connection pool and id generator injected.

    Every database call runs through run_bounded with its own session.
    Writes on the create/update/statistics paths are bounded by
    `timeout`; failures propagate as LinkServiceError subclasses and the
    API renders them. The click recorded on redirect is best-effort.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        id_generator: Optional[IdGenerator] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize link service with dependencies.

        Args:
            session_factory: Session factory bound to the shared engine
            id_generator: Id generator (defaults to the configured one)
            timeout: Seconds allowed per bounded call (defaults to settings)
        """
        self.session_factory = session_factory
        self.id_generator = id_generator or IdGeneratorFactory.create_generator()
        self.timeout = settings.database_timeout if timeout is None else timeout

    async def get_target_url(self, link_id: str) -> str:
        """
        Look up where a link points.

        Raises:
            LinkNotFound: No link with this id
        """
        def lookup(session: Session) -> Optional[str]:
            link = session.query(Link).filter(Link.id == link_id).first()
            return link.target_url if link else None

        target_url = await run_bounded(self.session_factory, lookup)
        if target_url is None:
            raise LinkNotFound()

        logger.debug("Redirecting link id %s to %s", link_id, target_url)
        return target_url

    async def record_click(
        self,
        link_id: str,
        referer: Optional[str],
        user_agent: Optional[str]
    ) -> bool:
        """
        Append one statistics row for a redirect.

        Never raises: a timeout or database error is logged and False is
        returned, so the redirect is served either way.
        """
        def insert(session: Session) -> None:
            session.add(LinkStatistic(link_id=link_id, referer=referer, user_agent=user_agent))
            session.commit()

        recorded = await record_best_effort(
            self.session_factory, insert, self.timeout, "Saving new link click"
        )
        if recorded:
            logger.debug(
                "Persisted new link click for link with id %s, referer %s, and user_agent %s",
                link_id,
                referer or "",
                user_agent or "",
            )
        return recorded

    async def create_link(self, target_url: str) -> LinkResponse:
        """Create a link with a freshly generated id

        The id is not checked for uniqueness; a collision fails the insert
        on the primary key and surfaces as a DatastoreError.

        Raises:
            MalformedURL: target_url is not an absolute URL
            OperationTimeout, DatastoreError: The insert failed
        """
        url = self._normalize(target_url, "url malformed")
        link_id = self.id_generator.generate()

        def insert(session: Session) -> LinkResponse:
            link = Link(id=link_id, target_url=url)
            session.add(link)
            session.commit()
            session.refresh(link)
            return LinkResponse.model_validate(link)

        link = await run_bounded(self.session_factory, insert, self.timeout)

        logger.debug("Created new link with id %s targeting %s", link_id, url)
        return link

    async def update_link(self, link_id: str, target_url: str) -> LinkResponse:
        """Point an existing link at a new URL

        An unknown link_id makes the single-row fetch fail, which surfaces
        as a DatastoreError (HTTP 500), not LinkNotFound.
        """
        url = self._normalize(target_url, "Url malformed")

        def update(session: Session) -> LinkResponse:
            link = session.query(Link).filter(Link.id == link_id).one()
            link.target_url = url
            session.commit()
            session.refresh(link)
            return LinkResponse.model_validate(link)

        link = await run_bounded(self.session_factory, update, self.timeout)

        logger.debug("Updated link with id %s, now targeting %s", link_id, url)
        return link

    async def get_link_statistics(self, link_id: str) -> List[CounterLinkStatistics]:
        """Redirect counts grouped by (referer, user agent)

        Unknown ids and links without clicks both give an empty list.
        """
        def query(session: Session) -> List[CounterLinkStatistics]:
            rows = (
                session.query(
                    func.count().label("amount"),
                    LinkStatistic.referer,
                    LinkStatistic.user_agent,
                )
                .filter(LinkStatistic.link_id == link_id)
                .group_by(LinkStatistic.link_id, LinkStatistic.referer, LinkStatistic.user_agent)
                .all()
            )
            return [
                CounterLinkStatistics(amount=row.amount, referer=row.referer, user_agent=row.user_agent)
                for row in rows
            ]

        statistics = await run_bounded(self.session_factory, query, self.timeout)

        logger.debug("Statistics for link with id %s requested", link_id)
        return statistics

    @staticmethod
    def _normalize(target_url: str, error_message: str) -> str:
        try:
            return normalize_url(target_url)
        except ValidationError:
            raise MalformedURL(error_message) from None
