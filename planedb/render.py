"""Plain-text rendering of lookup results."""

from typing import List, Optional

from planedb.models import TypeInfo, PlaneInfo

NOT_FOUND = 'Plane not found'
NO_MODEL_INFO = 'No model info'


def format_type_info(type_info: TypeInfo) -> str:
    lines = ['  ## Type']
    if type_info.manufacturer:
        lines.append(f'    Manufacturer   : {type_info.manufacturer}')
    if type_info.model:
        lines.append(f'    Model name     : {type_info.model}')
    lines.append(f'    Type           : {type_info.category} - {type_info.category_description}')
    lines.append(f'    Seats          : {type_info.seats}')
    return '\n'.join(lines)


def format_plane_info(plane: Optional[PlaneInfo], type_info: Optional[TypeInfo] = None) -> str:
    """
    Render a registration and its resolved type.

    A registration whose model did not resolve gets 'No model info'
    in place of the type block.
    """
    if plane is None:
        return NOT_FOUND

    lines: List[str] = ['  ## Registration']
    if plane.n_number:
        lines.append(f'    N-Number       : {plane.tail_number}')
    if plane.registrant:
        lines.append(f'    Registrant     : {plane.registrant}')
    if plane.model_id:
        lines.append(f'    Model          : {plane.model_id}')

    if type_info is None:
        lines.append(NO_MODEL_INFO)
    else:
        lines.append(format_type_info(type_info))
    return '\n'.join(lines)
