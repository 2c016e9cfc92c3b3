from fibspiral.renderers.base import StatefulBaseRenderer as StatefulBaseRenderer
from fibspiral.renderers.state_provider import \
    ObservableProvider as ObservableProvider
