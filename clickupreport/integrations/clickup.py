"""ClickUp integration for clickup-report."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

import requests
from pydantic import ValidationError

from clickupreport.models.task import Task, TaskList
from clickupreport.models.constants import CLICKUP_API_BASE, DEFAULT_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from clickupreport.config import Settings

logger = logging.getLogger(__name__)


class ClickUpAPIError(RuntimeError):
    """A ClickUp request failed or returned a payload we could not read."""


class ClickUpClient:
    """Read-only client for the ClickUp v2 REST API."""

    def __init__(
        self,
        api_key: str,
        space_id: str,
        api_base: str = CLICKUP_API_BASE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """Initialize ClickUp client.

        Args:
            api_key: Personal API token (sent as-is in the Authorization header)
            space_id: Space whose lists and tasks are read
            api_base: API root URL
            timeout: Per-request timeout in seconds
        """
        if not api_key:
            raise ValueError("ClickUp API key is required.")
        if not space_id:
            raise ValueError("ClickUp space ID is required.")

        self.space_id = space_id
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Authorization": api_key,
            "Content-Type": "application/json",
        }

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ClickUpClient":
        """Build a client from a Settings value."""
        return cls(
            api_key=settings.api_key,
            space_id=settings.space_id,
            api_base=settings.api_base,
            timeout=settings.timeout_seconds,
        )

    def _get(self, path: str, params: Optional[dict] = None, what: str = "resource") -> dict:
        """GET a JSON object from the API.

        Raises:
            ClickUpAPIError: On transport errors, non-2xx status, or non-object JSON
        """
        url = f"{self.api_base}{path}"
        logger.debug(f"GET {url} params={params}")
        try:
            response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise ClickUpAPIError(f"failed to fetch {what}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise ClickUpAPIError(f"network error while fetching {what}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ClickUpAPIError(f"error parsing {what} response: {e}") from e
        if not isinstance(payload, dict):
            raise ClickUpAPIError(f"error parsing {what} response: expected a JSON object")
        return payload

    @staticmethod
    def _parse_lists(raw_lists, what: str) -> List[TaskList]:
        try:
            return [TaskList.model_validate(item) for item in raw_lists or []]
        except (ValidationError, TypeError) as e:
            raise ClickUpAPIError(f"error parsing {what} response: {e}") from e

    def fetch_lists(self) -> List[TaskList]:
        """Fetch every list in the space.

        Lists inside folders come first, followed by folderless lists.

        Returns:
            List of TaskList objects

        Raises:
            ClickUpAPIError: If either request fails
        """
        folders_payload = self._get(f"/space/{self.space_id}/folder", what="folders")
        lists: List[TaskList] = []
        for folder in folders_payload.get("folders") or []:
            if not isinstance(folder, dict):
                raise ClickUpAPIError("error parsing folders response: folder is not an object")
            lists.extend(self._parse_lists(folder.get("lists"), "folders"))

        folderless_payload = self._get(
            f"/space/{self.space_id}/list",
            params={"archived": "false"},
            what="folderless lists",
        )
        lists.extend(self._parse_lists(folderless_payload.get("lists"), "folderless lists"))

        logger.debug(f"Found {len(lists)} lists in space {self.space_id}")
        return lists

    def fetch_tasks(self, list_id: str) -> List[Task]:
        """Fetch all tasks of a list, including subtasks and closed tasks.

        Args:
            list_id: List to read

        Returns:
            List of Task objects

        Raises:
            ClickUpAPIError: If the request fails or a task cannot be parsed
        """
        payload = self._get(
            f"/list/{list_id}/task",
            params={"subtasks": "true", "include_closed": "true"},
            what="tasks",
        )
        try:
            tasks = [Task.model_validate(item) for item in payload.get("tasks") or []]
        except (ValidationError, TypeError) as e:
            raise ClickUpAPIError(f"error parsing tasks response: {e}") from e

        logger.debug(f"Fetched {len(tasks)} tasks from list {list_id}")
        return tasks


@dataclass
class CollectionResult:
    """Tasks gathered from a space, plus the lists that could not be read."""
    tasks: List[Task] = field(default_factory=list)
    lists: List[TaskList] = field(default_factory=list)
    skipped_lists: List[TaskList] = field(default_factory=list)


def collect_tasks(client: ClickUpClient) -> CollectionResult:
    """Gather tasks from every list in the client's space.

    A failure to enumerate lists propagates. A failure for a single list is
    logged and that list is skipped; the remaining lists are still read.

    Raises:
        ClickUpAPIError: If the lists cannot be enumerated
    """
    result = CollectionResult(lists=client.fetch_lists())
    for task_list in result.lists:
        logger.info(f"Fetching tasks from list: {task_list.name}")
        try:
            tasks = client.fetch_tasks(task_list.id)
        except ClickUpAPIError as e:
            logger.error(f"Error getting tasks for list {task_list.name}: {type(e).__name__}: {str(e)}")
            result.skipped_lists.append(task_list)
            continue
        result.tasks.extend(tasks)
    return result
