import asyncio
import os
import sys
from dotenv import load_dotenv

# Add project root to path
sys.path.append(os.getcwd())

# Load environment variables
load_dotenv()

import logging
logging.basicConfig(level=logging.INFO)

from ats_research import ProspectResearcher

DEFAULT_COMPANIES = ["https://linear.app", "stripe.com"]


async def test_research(companies):
    print("🚀 Starting ProspectResearcher smoke test")

    researcher = ProspectResearcher()

    for company in companies:
        print(f"\n🔍 Researching: {company}")
        try:
            # Run sync method in executor to simulate async behavior in main.py
            loop = asyncio.get_event_loop()
            result = await loop.run_in_executor(None, researcher.research, company)

            print("\n✅ Result:")
            print(f"Company: {result.company_name}")
            print(f"Careers URL: {result.careers_url}")
            print(f"ATS: {result.ats_detected}")
            print(f"Live roles: {result.live_roles}")
            print(f"Recruiter search: {result.linkedin_search_url}")

        except Exception as e:
            print(f"❌ Research failed: {e}")

if __name__ == "__main__":
    asyncio.run(test_research(sys.argv[1:] or DEFAULT_COMPANIES))
