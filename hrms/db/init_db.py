import logging
from hrms.core.database import Database
from hrms.db.seeds.initial_data import create_initial_data

logger = logging.getLogger(__name__)

async def init_db(database: Database, seed: bool = True):
    """Create the tables and, optionally, load the sample organization"""
    try:
        logger.info("🗄️  Initializing database...")
        
        await database.create_tables()
        logger.info("✅ Database tables created successfully")
        
        if seed:
            async with database.session() as session:
                await create_initial_data(session)
        
        logger.info("✅ Database initialized successfully")
        
    except Exception as e:
        logger.error(f"❌ Database initialization failed: {str(e)}")
        raise
