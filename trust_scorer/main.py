"""Main script for running the trust scorer interactively."""

import asyncio
import logging

from .domain.models.request import ContentType, VerificationRequest
from .domain.models.result import VerificationResult
from .infrastructure.dependencies import ServiceContainer


def print_result(result: VerificationResult) -> None:
    """Print a verification result in human readable form."""
    print("\nResults:")
    print(f"Trust score: {result.trust_score}/100")
    print(f"Content type: {result.content_classification.type.value}")
    print(f"Evidence tier: {result.source_verification.evidence_tier.value}")
    print(f"Processing time: {result.processing_time}ms")

    if result.sanity_check.issues:
        print("\nSanity issues:")
        for issue in result.sanity_check.issues:
            print(f"- {issue}")

    print(f"\nSummary: {result.source_verification.summary}")

    if result.source_verification.verdicts:
        print("\nVerdicts:")
        for i, verdict in enumerate(result.source_verification.verdicts, 1):
            print(f"{i}. [{verdict.verdict.value}] {verdict.claim_text} ({verdict.confidence}%)")

    if result.source_verification.sources:
        print("\nSources:")
        for i, source in enumerate(result.source_verification.sources, 1):
            print(f"{i}. {source.title} - {source.url} (credibility {source.credibility_score})")


async def main():
    """Run the trust scorer."""
    print("Trust Scorer - source-backed content verification")
    print("-------------------------------------------------")

    container = ServiceContainer()
    logging.basicConfig(
        level=container.config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    service = await container.get_verification_service()

    try:
        while True:
            # Get text or URL from user
            content = input("\nEnter text or a URL to verify (or 'quit' to exit): ").strip()
            if content.lower() in ('quit', 'exit', 'q'):
                break
            if not content:
                continue

            content_type = ContentType.URL if content.startswith(("http://", "https://")) else ContentType.TEXT
            print("\nVerifying...")
            result = await service.verify(VerificationRequest(content=content, content_type=content_type))
            print_result(result)

    finally:
        # Clean up
        await container.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
