# backend/smoke_analyze.py
# Manual end-to-end check against the real API: python smoke_analyze.py "some claim"
import asyncio
import sys

from dotenv import load_dotenv

# load .env from backend directory
load_dotenv()

from rumor_check.services.llm_agent import AnalysisClient


async def main(query: str):
    client = AnalysisClient()
    result = await client.analyze(query)
    print("Model:", client.model)
    print("Is rumor:", result.isRumor)
    print("Graph nodes:", len(result.graphData.nodes) if result.graphData else 0)
    print(result.message)


if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:]) or "某地发生地震"))
