import zipfile
from pathlib import Path

files_directory = Path(__file__).parent / 'files'
xml_directory = files_directory / 'XML'

def read_xml(fmi_version, model_name):
    """Contents of files/XML/<fmi_version>/<model_name>.xml as bytes."""
    return (xml_directory / fmi_version / (model_name + '.xml')).read_bytes()

def write_fmu(path, xml, entries = None):
    """
    Write a zip archive with modelDescription.xml first followed by entries.

    entries maps entry names to contents; None creates a directory entry.
    If xml is None no model description is written.
    """
    with zipfile.ZipFile(path, 'w', compression = zipfile.ZIP_DEFLATED) as zf:
        if xml is not None:
            zf.writestr('modelDescription.xml', xml)
        for name, data in (entries or {}).items():
            if data is None:
                zf.writestr(zipfile.ZipInfo(name), b'')
            else:
                zf.writestr(name, data)
    return path

def minimal_xml(fmi_version = "2.0", body = "", **attributes):
    """A model description with the given root attributes and contents."""
    attributes.setdefault('modelName', 'Model')
    attrs = ''.join(' %s="%s"' % (key, value) for key, value in attributes.items())
    if fmi_version is not None:
        attrs = ' fmiVersion="%s"' % fmi_version + attrs
    return '<?xml version="1.0" encoding="UTF-8"?>\n<fmiModelDescription%s>%s</fmiModelDescription>' % (attrs, body)
