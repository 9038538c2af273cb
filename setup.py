from setuptools import setup, find_packages

# Get the long description from the README file
def readme():
    with open('README.md', encoding='utf-8') as f:
        return f.read()

setup(
    name='polyct',
    version='0.1.0',
    description='Incidence complexes of polytopes built by extrusion and coning',
    long_description=readme(),
    long_description_content_type='text/markdown',
    license='MIT',
    packages=find_packages(exclude=['tests', '*.tests', '*.tests.*',
                                    'examples']),
    python_requires='>=3.7',
    install_requires=[
        'numpy>=1.16.0',
    ],
    extras_require={
        'dev': [
            'pytest>=6.0',
            'pytest-cov>=2.10',
        ],
    },
    keywords=['polytope', 'incidence-complex', 'hypercube', 'bipyramid',
              'combinatorics'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    zip_safe=False,
)
