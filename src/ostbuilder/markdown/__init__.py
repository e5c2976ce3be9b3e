"""OST markdown format: parse documents into trees and serialize them back.

Format::

    ## [Outcome] Title @status
    Description text
    - start: 0
    - current: 28
    - target: 40

    ### [Opportunity] Title @status
    #### [Solution] Title @status
    ##### [Experiment] Title @status
"""

from __future__ import annotations

from ostbuilder.markdown.parser import parse
from ostbuilder.markdown.project_name import apply_project_name, extract_project_name
from ostbuilder.markdown.serializer import serialize

__all__ = ["apply_project_name", "extract_project_name", "parse", "serialize"]
