__title__ = "spineapi"
__description__ = "Client for the Spine mod service: projects, news, ratings, reviews and preview images"
__intro__ = r"""
  ___ _ __(_)_ _  ___ __ _ _ __(_)
 (_-<| '_ \ | ' \/ -_) _` | '_ \ |
 /__/| .__/_|_||_\___\__,_| .__/_|
     |_|                  |_|
"""
__url__ = "https://github.com/spine-community/spineapi"
__version__ = "1.0.0"
__license__ = "GPLv3"
