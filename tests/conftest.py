import os
from tempfile import TemporaryDirectory
from pathlib import Path
import pytest

from utils import write_fmu, read_xml

@pytest.fixture(autouse=True, scope="session")
def test_session_in_tmp_dir_fixture():
    """Tests create FMU files; run the session in a temporary directory
    so nothing is written to the source tree."""
    with TemporaryDirectory() as tmpdirname:
        workdir = Path(tmpdirname)
        old_cwd = os.getcwd()
        os.chdir(workdir)
        yield Path(workdir)
        os.chdir(old_cwd)

@pytest.fixture
def make_fmu(tmp_path):
    """
    Factory fixture writing an FMU into tmp_path.

        make_fmu(xml, entries = None, name = 'model.fmu')

    xml is the model description (str or bytes), or None to leave it out.
    """
    def _make_fmu(xml, entries = None, name = 'model.fmu'):
        return write_fmu(tmp_path / name, xml, entries)
    return _make_fmu

@pytest.fixture
def reference_fmu(make_fmu):
    """
    Factory fixture building an FMU from one of the model descriptions in
    files/XML, with binaries and sources in the layout of the reference FMUs.

        reference_fmu('2.0', 'BouncingBall')
    """
    def _reference_fmu(fmi_version, model_name):
        if fmi_version.startswith('2'):
            platforms = ['darwin64', 'linux64', 'win64']
            suffixes = ['.dylib', '.so', '.dll']
        else:
            platforms = ['aarch64-darwin', 'x86_64-darwin', 'x86_64-linux', 'x86_64-windows']
            suffixes = ['.dylib', '.dylib', '.so', '.dll']
        entries = {}
        for platform, suffix in zip(platforms, suffixes):
            entries['binaries/%s/' % platform] = None
            entries['binaries/%s/%s%s' % (platform, model_name, suffix)] = b'\0' * 16
        entries['sources/'] = None
        entries['sources/all.c'] = b'#include "model.c"\n'
        entries['sources/buildDescription.xml'] = b'<fmiBuildDescription/>'
        name = '%s_fmi%s.fmu' % (model_name, fmi_version[0])
        return make_fmu(read_xml(fmi_version, model_name), entries, name = name)
    return _reference_fmu
