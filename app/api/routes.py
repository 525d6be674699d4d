from fastapi import APIRouter, HTTPException, Body
from fastapi.responses import PlainTextResponse
from typing import Dict, Any

from app.config import config  # Global config
from app.utils.timing import timed
from app.utils.logger import setup_logger
from ..services.nrc_conversion import NrcConverter, convert_to_sql
from ..services.nrc_conversion.help_content import help_payload

api_router = APIRouter(prefix='/api/v1')

# Setup logger for API
logger = setup_logger('api_routes')

DOWNLOAD_FILENAME = config.get('nrc_conversion', {}).get('download_filename', 'nrc_townships.sql')


def _require_input_text(payload: Dict[str, Any]) -> str:
    if 'input_text' not in payload:
        raise HTTPException(status_code=400, detail='input_text is required')
    input_text = payload['input_text']
    if input_text is not None and not isinstance(input_text, str):
        raise HTTPException(status_code=400, detail='input_text must be a string')
    return input_text


@api_router.get('/')
def root():
    return {
        'service': 'NRC Data Converter',
        'version': config.get('api', {}).get('version', 'v1'),
    }


@api_router.post('/nrc/convert')
def convert_nrc_endpoint(payload: Dict[str, Any] = Body(...)):
    """Convert pasted NRC rows to SQL; the result dict carries stats and timing."""
    input_text = _require_input_text(payload)
    check_output = payload.get('check_output')
    if check_output is not None and not isinstance(check_output, bool):
        raise HTTPException(status_code=400, detail='check_output must be a boolean')

    converter = NrcConverter(check_output=check_output)
    result = timed(converter.convert, input_text)
    logger.info(f"/nrc/convert finished with status '{result['status']}' in {result['duration_s']}s")
    return result


@api_router.post('/nrc/download', response_class=PlainTextResponse)
def download_nrc_endpoint(payload: Dict[str, Any] = Body(...)):
    """Return the converted script as a plain-text attachment."""
    input_text = _require_input_text(payload)

    sql = convert_to_sql(input_text)
    return PlainTextResponse(
        sql,
        media_type='text/plain',
        headers={'Content-Disposition': f'attachment; filename="{DOWNLOAD_FILENAME}"'},
    )


@api_router.get('/nrc/help')
def nrc_help():
    return help_payload()
