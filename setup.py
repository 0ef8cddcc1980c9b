# Copyright (c) 2013-2025 NASK. All rights reserved.

import glob
import os.path as osp
import sys

from setuptools import setup, find_packages


setup_dir, setup_filename = osp.split(osp.abspath(__file__))
setup_human_readable_ref = osp.join(osp.basename(setup_dir), setup_filename)

def get_n6_version(filename_base):
    path_base = osp.join(setup_dir, filename_base)
    path_glob_pattern = path_base + '*'
    # The non-suffixed path variant should be
    # tried only if another one does not exist.
    matching_paths = sorted(glob.iglob(path_glob_pattern),
                            reverse=True)
    try:
        path = matching_paths[0]
    except IndexError:
        sys.exit('[{}] Cannot determine the n6charutil version '
                 '(no files match the pattern {!a}).'
                 .format(setup_human_readable_ref,
                         path_glob_pattern))
    try:
        with open(path, encoding='ascii') as f:
            return f.read().strip()
    except (OSError, UnicodeError) as exc:
        sys.exit('[{}] Cannot determine the n6charutil version '
                 '(an error occurred when trying to '
                 'read it from the file {!a} - {}).'
                 .format(setup_human_readable_ref,
                         path,
                         exc))

def read_requirements(filename):
    requirements = []
    dep_links = []
    with open(osp.join(setup_dir, filename), encoding='ascii') as f:
        for raw_line in f:
            line = raw_line.strip()
            if not line or line.startswith('#'):
                continue
            req = line.split('\t')
            requirements.append(req[0])
            try:
                dep_links.append(req[1])
            except IndexError:
                pass
    return requirements, dep_links


n6charutil_version = get_n6_version('.n6-version')

requirements, dep_links = read_requirements('requirements')
test_requirements, test_dep_links = read_requirements('test-requirements')


setup(
    name="n6charutil",
    version=n6charutil_version,

    packages=find_packages(include=['n6charutil', 'n6charutil.*']),
    dependency_links=(dep_links + test_dep_links),
    install_requires=requirements,
    extras_require={'test': test_requirements},
    python_requires='>=3.9',
    include_package_data=True,
    zip_safe=False,

    description='UTF-8 <-> UTF-16 conversion and UTF-8 validation helpers.',
    url='https://github.com/CERT-Polska/n6',
    maintainer='CERT Polska',
    maintainer_email='n6@cert.pl',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
    ],
    keywords='n6 unicode utf-8 utf-16 surrogate conversion validation',
)
