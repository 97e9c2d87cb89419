from fastapi import APIRouter, Depends

from union_office.dependencies import get_mail_service
from union_office.schemas.support_schemas import MailResultResponse, SupportRequest
from union_office.services.mail_service import MailService

router = APIRouter()


@router.post("", response_model=MailResultResponse)
async def send_support_request(data: SupportRequest, mail: MailService = Depends(get_mail_service)):
    """
    Forward a support request to the support mailbox.

    Delivery failures are reported in the body (success=false), not as errors.
    """
    result = mail.send_support_email(data.name, data.email, data.subject, data.message)
    return MailResultResponse(success=result.success, data=result.data, error=result.error)
