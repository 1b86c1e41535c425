from typing import List, Optional, Type
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie, Document
from pymongo.errors import ServerSelectionTimeoutError

from foldertree.utils.logging import get_logger

logger = get_logger(__name__)


class MongoDB:
    """MongoDB connection manager using Beanie ODM

    One instance is created at startup and handed to whoever needs it; it is
    not a module-level global.
    """

    def __init__(self, url: str, database_name: str, connect_timeout_ms: int = 30000):
        self.url = url
        self.database_name = database_name
        self.connect_timeout_ms = connect_timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self.database = None

    async def connect(self, document_models: List[Type[Document]] = None):
        """Connect to MongoDB and initialize Beanie"""
        try:
            self.client = AsyncIOMotorClient(
                self.url,
                serverSelectionTimeoutMS=8000,
                connectTimeoutMS=self.connect_timeout_ms,
                socketTimeoutMS=None,
                maxPoolSize=50,
                minPoolSize=0,
            )

            await self.client.admin.command('ping')

            self.database = self.client[self.database_name]

            if document_models:
                await init_beanie(
                    database=self.database,
                    document_models=document_models
                )
                logger.info(
                    f"Beanie initialized with {len(document_models)} document models")

            return True

        except ServerSelectionTimeoutError as e:
            logger.error(f"Failed to connect to MongoDB (timeout): {e}")
            raise ConnectionError("Cannot connect to MongoDB server")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            raise

    async def ping(self) -> bool:
        if not self.client:
            return False
        try:
            await self.client.admin.command('ping')
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {str(e)}")
            return False

    async def disconnect(self):
        """Disconnect from MongoDB"""
        if self.client:
            self.client.close()
            self.client = None
            self.database = None
            logger.info("Disconnected from MongoDB")
