"""Client views over the block registry."""

import logging

from dwell.client.api import DwellAPIError
from dwell.client.session import SessionContext
from dwell.schemas.block import DEFAULT_BLOCK_REASON, BlockResponse

logger = logging.getLogger(__name__)


class BlockRegistry:
    """Block queries and mutations on behalf of the signed-in user."""

    def __init__(self, session: SessionContext):
        self.session = session

    def _is_self_or_anonymous(self, target_user_id: int) -> bool:
        return not self.session.is_authenticated or self.session.user_id == target_user_id

    async def check_block_status(self, target_user_id: int) -> bool:
        """True if either user blocked the other. Anonymous or self is never blocked."""
        if self._is_self_or_anonymous(target_user_id):
            return False
        return await self.session.api.is_blocked(target_user_id)

    async def block(
        self, target_user_id: int, reason: str = DEFAULT_BLOCK_REASON
    ) -> BlockResponse:
        return await self.session.api.create_block(target_user_id, reason)

    async def unblock(self, target_user_id: int) -> None:
        await self.session.api.remove_block(target_user_id)


class BlockStatus:
    """Block state of one target, with loading flag and manual refetch."""

    def __init__(self, registry: BlockRegistry, target_user_id: int):
        self.registry = registry
        self.target_user_id = target_user_id
        self.is_blocked = False
        self.is_loading = True

    async def refetch(self) -> bool:
        self.is_loading = True
        try:
            self.is_blocked = await self.registry.check_block_status(self.target_user_id)
        except DwellAPIError as e:
            logger.error(f"Error checking block status: {e}")
        finally:
            self.is_loading = False
        return self.is_blocked


class BlockButton:
    """Block/unblock toggle shown next to another user's content."""

    def __init__(self, session: SessionContext, target_user_id: int):
        self.session = session
        self.target_user_id = target_user_id
        self.status = BlockStatus(BlockRegistry(session), target_user_id)
        self.is_busy = False

    async def mount(self) -> None:
        await self.status.refetch()

    @property
    def is_blocked(self) -> bool:
        return self.status.is_blocked

    @property
    def visible(self) -> bool:
        return (
            self.session.is_authenticated
            and self.session.user_id != self.target_user_id
            and not self.status.is_loading
        )

    @property
    def label(self) -> str:
        return "Unblock User" if self.is_blocked else "Block User"

    async def block(self, reason: str = DEFAULT_BLOCK_REASON) -> bool:
        toaster = self.session.toaster
        if not self.session.is_authenticated:
            toaster.error("Sign in Required", "Please sign in to block users.")
            return False
        if self.session.user_id == self.target_user_id:
            toaster.error("Invalid Action", "You cannot block yourself.")
            return False
        if self.is_blocked or self.is_busy:
            return False

        self.is_busy = True
        try:
            await self.status.registry.block(self.target_user_id, reason)
        except DwellAPIError as e:
            logger.error(f"Error blocking user: {e}")
            toaster.error("Error", "Failed to block user. Please try again.")
            return False
        finally:
            self.is_busy = False

        self.status.is_blocked = True
        toaster.show(
            "User Blocked", "You will no longer be able to send messages to each other."
        )
        return True

    async def unblock(self) -> bool:
        if not self.session.is_authenticated or self.is_busy:
            return False

        self.is_busy = True
        try:
            await self.status.registry.unblock(self.target_user_id)
        except DwellAPIError as e:
            logger.error(f"Error unblocking user: {e}")
            self.session.toaster.error("Error", "Failed to unblock user. Please try again.")
            return False
        finally:
            self.is_busy = False

        self.status.is_blocked = False
        self.session.toaster.show(
            "User Unblocked", "You can now send messages to each other again."
        )
        return True

    async def toggle(self) -> bool:
        if self.is_blocked:
            return await self.unblock()
        return await self.block()
