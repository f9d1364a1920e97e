"""API routes for the Combination Generator."""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from binary_variations.config import Settings, get_settings
from binary_variations.generator import (
    VariationsTooLargeError,
    expected_count,
    generate_combinations,
    join,
    split_into_chunks,
    to_frame,
)
from binary_variations.models.generator import (
    GeneratorCountRequest,
    GeneratorCountResponse,
    GeneratorPreviewRequest,
    GeneratorPreviewResponse,
    GeneratorRequest,
    GeneratorResponse,
    JoinRequest,
    JoinResponse,
)

router = APIRouter(prefix="/generator", tags=["generator"])


def _num_files(total: int, chunk_size: int) -> int:
    return (total + chunk_size - 1) // chunk_size  # Ceiling division


def _check_size(variations: list, settings: Settings) -> None:
    """Reject requests above the configured variation limit."""
    if len(variations) > settings.max_variations:
        raise VariationsTooLargeError(len(variations), settings.max_variations)


@router.post("/calculate-count", response_model=GeneratorCountResponse)
async def calculate_count(
    request: GeneratorCountRequest,
    settings: Settings = Depends(get_settings)
):
    """
    Calculate the number of combinations.

    Without a filter the count is 2^N - 1; with a filter the combinations
    are generated to count the ones that pass.
    """
    try:
        _check_size(request.variations, settings)
        expected = expected_count(request.variations)
        total = expected
        if request.filter is not None:
            total = len(generate_combinations(request.variations, request.filter))

        return GeneratorCountResponse(
            expected=expected,
            total_combinations=total,
            num_files=_num_files(total, settings.chunk_size)
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error calculating count: {str(e)}")


@router.post("/preview", response_model=GeneratorPreviewResponse)
async def generate_preview(
    request: GeneratorPreviewRequest,
    settings: Settings = Depends(get_settings)
):
    """
    Generate a preview of the combinations (first N rows).
    """
    try:
        _check_size(request.variations, settings)
        df = to_frame(
            request.variations,
            request.filter,
            request.separator,
            request.prefix,
            request.suffix
        )

        total = len(df)
        preview_df = df.head(request.preview_limit or settings.preview_limit)

        return GeneratorPreviewResponse(
            total_combinations=total,
            preview_data=preview_df.to_dict(orient='records'),
            columns=list(df.columns),
            num_files=_num_files(total, settings.chunk_size)
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating preview: {str(e)}")


@router.post("/generate", response_model=GeneratorResponse)
async def generate(
    request: GeneratorRequest,
    settings: Settings = Depends(get_settings)
):
    """
    Generate all combinations together with their joined labels.
    """
    try:
        _check_size(request.variations, settings)
        combinations = generate_combinations(request.variations, request.filter)

        return GeneratorResponse(
            total_combinations=len(combinations),
            combinations=combinations,
            names=[
                join(combination, request.separator, request.prefix, request.suffix)
                for combination in combinations
            ]
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating combinations: {str(e)}")


@router.post("/join", response_model=JoinResponse)
async def join_combination(request: JoinRequest):
    """
    Join a single combination into a string.
    """
    return JoinResponse(
        joined=join(request.combination, request.separator, request.prefix, request.suffix)
    )


@router.post("/download")
async def download_csv(
    request: GeneratorRequest,
    part: int = Query(default=1, ge=1, description="1-based CSV file number"),
    settings: Settings = Depends(get_settings)
):
    """
    Download one CSV file of the combinations.

    Results larger than chunk_size rows are split into num_files parts,
    each fetched with its own part number.
    """
    try:
        _check_size(request.variations, settings)
        df = to_frame(
            request.variations,
            request.filter,
            request.separator,
            request.prefix,
            request.suffix
        )
        chunks = split_into_chunks(df, chunk_size=settings.chunk_size)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating CSV: {str(e)}")

    if part > len(chunks):
        raise HTTPException(status_code=404, detail=f"Part {part} not found, result has {len(chunks)} file(s)")

    if len(chunks) == 1:
        filename = "combinations.csv"
    else:
        filename = f"combinations_part{part}.csv"

    return Response(
        content=chunks[part - 1].to_csv(index=False),
        media_type='text/csv',
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
