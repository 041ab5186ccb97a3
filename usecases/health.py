from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession


class HealthUsecase:
    async def check_database(self, session: AsyncSession) -> bool:
        """Check database connectivity.

        Args:
            session: The async session.

        Returns:
            True if the database is healthy, False otherwise.

        """
        try:
            await session.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    async def health(self, session: AsyncSession) -> dict[str, bool]:
        """Check the services the corpus depends on.

        Args:
            session: The async session.

        Returns:
            Dictionary of service names and their health status.

        """
        return {"database": await self.check_database(session=session)}
